"""
Encrypt / Decrypt / Precommit commands - forward .env files to dotenvx.
"""
import typer
from typing import List, Optional

from core.env.dispatcher import Action
from core.env.orchestrator import Orchestrator


def run_action(action: Action, files: Optional[List[str]] = None):
    """
    Run an action through the orchestrator and exit with its code.
    """
    code = Orchestrator().run(action, files)
    if code != 0:
        raise typer.Exit(code=code)


def encrypt(
    files: Optional[List[str]] = typer.Argument(
        None, help="Files to encrypt (prompts for a selection if omitted)"
    ),
):
    """
    Encrypt .env files with dotenvx.
    """
    run_action(Action.ENCRYPT, files)


def decrypt(
    files: Optional[List[str]] = typer.Argument(
        None, help="Files to decrypt (prompts for a selection if omitted)"
    ),
):
    """
    Decrypt .env files with dotenvx.
    """
    run_action(Action.DECRYPT, files)


def precommit():
    """
    Install the dotenvx precommit hook.
    """
    run_action(Action.PRECOMMIT)
