import os
from dotenv import load_dotenv

# The managed .env* files are never loaded into the process environment.
load_dotenv(os.getenv("DOTENVX_INTERACTIVE_CONFIG", ".dotenvx-interactive"))


def _optional_bool(value):
    if value is None or value == "":
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    DOTENVX_BIN = os.getenv("DOTENVX_BIN", "dotenvx")
    KEYS_FILE = os.getenv("DOTENVX_KEYS_FILE", ".env.keys")
    ENV_PREFIX = os.getenv("DOTENVX_ENV_PREFIX", ".env")
    WORK_DIR = os.getenv("DOTENVX_INTERACTIVE_WORK_DIR", ".")
    LOG_FILE = os.getenv("DOTENVX_INTERACTIVE_LOG_FILE")
    FORCE_COLOR = _optional_bool(os.getenv("DOTENVX_INTERACTIVE_FORCE_COLOR"))

    EXCLUDED_SUFFIXES = (".keys", ".vault")

    INSTALL_HINT = "npm install -g @dotenvx/dotenvx"
