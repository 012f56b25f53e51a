"""
Startup checks: is dotenvx reachable and does the key file exist?
"""
import shutil
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from core.config import Config
from core.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Prerequisites:
    dotenvx_available: bool
    keys_file_present: bool

    @property
    def ready(self) -> bool:
        return self.dotenvx_available and self.keys_file_present


def is_dotenvx_available(binary: str = None) -> bool:
    """
    Resolve the dotenvx executable on PATH. Absence is a normal result.
    """
    try:
        return shutil.which(binary or Config.DOTENVX_BIN) is not None
    except OSError as e:
        logger.debug("Could not resolve %s: %s", binary or Config.DOTENVX_BIN, e)
        return False


def resolve_executable(binary: str = None) -> str:
    """
    Full path of the dotenvx executable, or the bare name when it is not on PATH.

    ``which`` honours PATHEXT (``dotenvx.cmd`` on Windows), process creation
    does not.
    """
    binary = binary or Config.DOTENVX_BIN
    try:
        return shutil.which(binary) or binary
    except OSError:
        return binary


def is_keys_file_present(work_dir: str = None, keys_file: str = None) -> bool:
    path = Path(work_dir or Config.WORK_DIR) / (keys_file or Config.KEYS_FILE)
    try:
        return path.is_file()
    except OSError as e:
        logger.debug("Could not access %s: %s", path, e)
        return False


def probe(config=Config) -> Prerequisites:
    """
    Run both startup checks concurrently and join them.

    Args:
        config: Configuration holder (defaults to ``Config``).

    Returns:
        Prerequisites: Availability of dotenvx and presence of the key file.
    """
    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=2) as executor:
        dotenvx_future = executor.submit(is_dotenvx_available, config.DOTENVX_BIN)
        keys_future = executor.submit(is_keys_file_present, config.WORK_DIR, config.KEYS_FILE)
        prerequisites = Prerequisites(
            dotenvx_available=dotenvx_future.result(),
            keys_file_present=keys_future.result(),
        )
    logger.debug(
        "Startup checks finished in %.1f ms: %s",
        (time.perf_counter() - started) * 1000,
        prerequisites,
    )
    return prerequisites
