from enum import Enum
from typing import Callable, Optional, Sequence

from core.config import Config
from core.errors import CommandFailed
from core.env import prober, runner
from core.env.runner import ExecutionResult
from core.utils.cancel import CancellationToken


class Action(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    PRECOMMIT = "precommit"
    MENU = "menu"
    EXIT = "exit"

    @property
    def takes_files(self) -> bool:
        return self in (Action.ENCRYPT, Action.DECRYPT)


def build_arguments(action: Action, files: Sequence[str] = ()) -> list[str]:
    """
    Translate an action into dotenvx arguments.

    >>> build_arguments(Action.ENCRYPT, [".env", ".env.local"])
    ['encrypt', '-f', '.env', '.env.local']
    >>> build_arguments(Action.PRECOMMIT)
    ['ext', 'precommit', '--install']
    """
    if action.takes_files:
        return [action.value, "-f", *files]
    if action is Action.PRECOMMIT:
        return ["ext", "precommit", "--install"]
    raise ValueError(f"Action {action.value!r} does not run dotenvx")


def dispatch(
    action: Action,
    files: Sequence[str] = (),
    run: Optional[Callable[..., ExecutionResult]] = None,
    config=Config,
    token: Optional[CancellationToken] = None,
) -> ExecutionResult:
    """
    Run dotenvx for an action and check its exit code.

    Raises:
        CommandFailed: If dotenvx exits with a non-zero code.
    """
    run = run or runner.run
    executable = prober.resolve_executable(config.DOTENVX_BIN)
    result = run(executable, build_arguments(action, files), token=token)
    if not result.ok:
        raise CommandFailed(action, result)
    return result
