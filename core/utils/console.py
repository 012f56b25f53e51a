from rich.console import Console
from rich.markup import escape

from core.config import Config

console = Console(force_terminal=Config.FORCE_COLOR, highlight=False, soft_wrap=True)

def info(msg): console.print(f"ℹ️  {escape(msg)}", style="blue")
def success(msg): console.print(f"✅ {escape(msg)}", style="green")
def warning(msg): console.print(f"⚠️  {escape(msg)}", style="yellow")
def error(msg): console.print(f"❌ {escape(msg)}", style="red")
def debug(msg): console.print(f"🔍 {escape(msg)}", style="dim")
def farewell(): console.print("👋 until next time!")
