"""Console feedback for sync commands."""

from typing import Optional

from rich.console import Console
from rich.text import Text


LABEL_STYLES = {
    "NEW": "bold green",
    "BACKUP": "bold cyan",
    "SAME": "dim",
    "CHANGED": "bold yellow",
    "MISSING": "bold magenta",
    "OK": "bold green",
    "ERROR": "bold red",
}


class Reporter:
    """
    Prints status lines for the user.

    Attributes:
        verbose: Also print low-importance messages (``babble``)
        headless: Print nothing at all
    """

    def __init__(self, verbose: bool = False, headless: bool = False, console: Optional[Console] = None):
        self.verbose = verbose
        self.headless = headless
        self.console = console or Console(highlight=False)

    def say(self, message: str, label: Optional[str] = None) -> None:
        """Print a message, optionally prefixed with a ``[LABEL]``."""
        if self.headless:
            return
        text = Text()
        if label:
            text.append(f"[{label}]", style=LABEL_STYLES.get(label, "bold"))
            text.append(" ")
        text.append(message)
        self.console.print(text, soft_wrap=True)

    def babble(self, message: str, label: Optional[str] = None) -> None:
        """Print a message only in verbose mode."""
        if self.verbose:
            self.say(message, label)

    def ok(self, message: str) -> None:
        self.say(message, "OK")

    def error(self, message: str) -> None:
        self.say(message, "ERROR")
