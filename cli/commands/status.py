from rich import print
from rich.markup import escape

from core.config import Config
from core.env.discovery import discover
from core.env.prober import probe, resolve_executable
from core.errors import FileSystemError
from core.utils import console


def status():
    """
    Show dotenvx availability, the key file and the .env files found.
    """
    print("[blue]dotenvx-interactive Status[/blue]")

    prerequisites = probe()
    binary = escape(Config.DOTENVX_BIN)
    keys_file = escape(Config.KEYS_FILE)

    if prerequisites.dotenvx_available:
        print(f"[green]dotenvx:[/green] Found ({binary})")
        console.debug(f"Runs as {resolve_executable()}")
    else:
        print(f"[red]dotenvx:[/red] Not found on PATH ({binary})")
        print(f"  Install it using: {Config.INSTALL_HINT}")

    if prerequisites.keys_file_present:
        print(f"[green]Key file:[/green] Found at {keys_file}")
    else:
        print(f"[red]Key file:[/red] Not found ({keys_file})")
        print("  Create one to encrypt or decrypt files.")

    try:
        files = discover()
    except FileSystemError as e:
        print(f"[red].env files:[/red] {escape(str(e))}")
        return

    if files:
        print(f"[green].env files:[/green] {len(files)} found")
        for path in files:
            print(f"  • {escape(path)}")
    else:
        print("[yellow].env files:[/yellow] None found in the current directory.")
