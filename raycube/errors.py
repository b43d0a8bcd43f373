"""Error type and message formatting for scene loading and play."""

from __future__ import annotations

RED = "\033[31m"
RESET = "\033[0m"


class CubError(Exception):
    """A scene file or game state is invalid."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


def format_error(message: str) -> str:
    """Return the coloured report printed on standard error for a failure."""
    return f"{RED}ERROR\n{message}\n{RESET}"