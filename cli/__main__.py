"""
dotenvx-interactive Command Line Interface - Main entry point.
"""
import typer
from rich import print
from importlib.metadata import PackageNotFoundError, version as distribution_version

from cli.commands import envfiles, status
from core.env.dispatcher import Action
from core.utils.logger import setup_logging

app = typer.Typer(
    name="dotenvx-interactive",
    help="Interactive CLI to encrypt and decrypt .env files with dotenvx",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)

# Register commands
app.command("encrypt")(envfiles.encrypt)
app.command("decrypt")(envfiles.decrypt)
app.command("precommit")(envfiles.precommit)
app.command("status")(status.status)


def get_version() -> str:
    try:
        return distribution_version("dotenvx-interactive")
    except PackageNotFoundError:
        return "development"


def print_version():
    print(f"[blue]🔐 dotenvx-interactive[/blue] version [green]{get_version()}[/green]")


def version_callback(value: bool):
    if value:
        print_version()
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show the version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """
    🔐 dotenvx-interactive

    Pick .env files from the current directory and encrypt or decrypt them
    with dotenvx. Run without a command to open the interactive menu.
    """
    setup_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        print("[bold]dotenvx-interactive[/bold]")
        envfiles.run_action(Action.MENU)


@app.command("version")
def version():
    """
    Show dotenvx-interactive version information.
    """
    print_version()


if __name__ == "__main__":
    app()
