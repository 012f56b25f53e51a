"""
Run an external command, mirroring its output live while capturing it.
"""
import codecs
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import IO, Optional, Sequence

from core.errors import OperationCancelled, SpawnError
from core.utils.cancel import CancellationToken
from core.utils.logger import get_logger

logger = get_logger()

TERMINATE_TIMEOUT_SECONDS = 5
READ_CHUNK_SIZE = 4096


@dataclass(frozen=True)
class ExecutionResult:
    stdout: str
    stderr: str
    exit_code: int
    command: tuple = ()

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def _tee(pipe: IO[bytes], sink: IO[str], buffer: list) -> None:
    """Copy a child pipe to a live sink and a capture buffer until EOF.

    Reads whatever bytes are available, so output without a trailing
    newline is forwarded as soon as the child flushes it.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    try:
        for data in iter(lambda: pipe.read1(READ_CHUNK_SIZE), b""):
            _emit(decoder.decode(data), sink, buffer)
        _emit(decoder.decode(b"", final=True), sink, buffer)
    finally:
        pipe.close()


def _emit(text: str, sink: IO[str], buffer: list) -> None:
    if not text:
        return
    buffer.append(text)
    sink.write(text)
    sink.flush()


def run(
    executable: str,
    args: Sequence[str] = (),
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
    token: Optional[CancellationToken] = None,
) -> ExecutionResult:
    """
    Execute ``executable`` with ``args`` and wait for it to finish.

    Arguments are handed to the child as a list, never through a shell.
    Each output stream has its own reader thread writing to both the live
    sink and a buffer.

    Args:
        executable (str): Program to start.
        args (Sequence[str]): Arguments, one element per argument.
        stdout (Optional[IO[str]]): Live sink for the child's stdout
            (defaults to ``sys.stdout``).
        stderr (Optional[IO[str]]): Live sink for the child's stderr
            (defaults to ``sys.stderr``).
        token (Optional[CancellationToken]): Tripped on interrupt.

    Returns:
        ExecutionResult: Captured output and exit code. A non-zero exit code
        is returned, not raised.

    Raises:
        SpawnError: If the executable cannot be started.
        OperationCancelled: If the operator interrupts the child.
    """
    command = (executable, *args)
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    logger.debug("Running %s", list(command))
    try:
        proc = subprocess.Popen(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise SpawnError(f"Failed to start {executable}: {e.strerror or e}") from e

    out_buffer, err_buffer = [], []
    readers = [
        threading.Thread(target=_tee, args=(proc.stdout, stdout, out_buffer), daemon=True),
        threading.Thread(target=_tee, args=(proc.stderr, stderr, err_buffer), daemon=True),
    ]
    for reader in readers:
        reader.start()

    try:
        proc.wait()
    except KeyboardInterrupt:
        if token is not None:
            token.cancel(f"{executable} interrupted")
        proc.terminate()
        try:
            proc.wait(timeout=TERMINATE_TIMEOUT_SECONDS)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
        raise OperationCancelled(f"{executable} interrupted")
    finally:
        for reader in readers:
            reader.join()

    exit_code = proc.returncode if proc.returncode is not None else 0
    logger.debug("%s exited with code %s", executable, exit_code)
    return ExecutionResult(
        stdout="".join(out_buffer),
        stderr="".join(err_buffer),
        exit_code=exit_code,
        command=command,
    )
