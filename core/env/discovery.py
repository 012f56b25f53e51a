import os
from pathlib import Path

from core.config import Config
from core.errors import FileSystemError
from core.utils.logger import get_logger

logger = get_logger()


def is_candidate(name: str, config=Config) -> bool:
    """
    Whether a file name is an environment file dotenvx should encrypt or decrypt.

    Key files (``.env.keys``, ``.env.keys.json``) and anything ending in
    ``.keys`` or ``.vault`` are never candidates.
    """
    if not name.startswith(config.ENV_PREFIX):
        return False
    if name in (config.KEYS_FILE, config.KEYS_FILE + ".json"):
        return False
    return not name.endswith(tuple(config.EXCLUDED_SUFFIXES))


def discover(directory: str = None, config=Config) -> list[str]:
    """
    List the environment files of a directory.

    Args:
        directory (str): Directory to scan. Defaults to ``Config.WORK_DIR``.
        config: Configuration holder (defaults to ``Config``).

    Returns:
        list[str]: Sorted candidate paths. Bare file names when scanning the
        current directory, ``directory/name`` otherwise.

    Raises:
        FileSystemError: If the directory cannot be read.
    """
    directory = directory or config.WORK_DIR
    try:
        with os.scandir(directory) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if is_candidate(entry.name, config) and entry.is_file()
            )
    except OSError as e:
        raise FileSystemError(f"Cannot read directory {directory}: {e.strerror or e}") from e

    logger.debug("Discovered %d env file(s) in %s: %s", len(names), directory, names)
    if Path(directory) == Path("."):
        return names
    return [str(Path(directory) / name) for name in names]
