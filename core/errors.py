"""
Error types raised by the core and mapped to exit codes by the orchestrator.
"""


class DotenvxInteractiveError(Exception):
    exit_code = 1


class PrerequisiteMissing(DotenvxInteractiveError):
    def __init__(self, message: str, hint: str):
        super().__init__(message)
        self.hint = hint


class FileSystemError(DotenvxInteractiveError):
    pass


class SpawnError(DotenvxInteractiveError):
    pass


class CommandFailed(DotenvxInteractiveError):
    def __init__(self, action, result):
        self.action = action
        self.result = result
        command = " ".join(result.command) or "dotenvx"
        message = f"{command} exited with code {result.exit_code}"
        details = " ".join(line.strip() for line in result.stderr.splitlines() if line.strip())
        if details:
            message += f": {details}"
        super().__init__(message)


class OperationCancelled(DotenvxInteractiveError):
    """Operator aborted; benign."""

    exit_code = 0


class SelectionCancelled(OperationCancelled):
    pass
