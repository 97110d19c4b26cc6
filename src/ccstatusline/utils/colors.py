"""ANSI color codes for widget output."""

RESET = "\033[0m"

ANSI_COLORS: dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "gray": "\033[90m",
    "brightBlack": "\033[90m",
    "brightRed": "\033[91m",
    "brightGreen": "\033[92m",
    "brightYellow": "\033[93m",
    "brightBlue": "\033[94m",
    "brightMagenta": "\033[95m",
    "brightCyan": "\033[96m",
    "brightWhite": "\033[97m",
    "dim": "\033[2m",
}


def colorize(text: str, color: str) -> str:
    """Wrap text in the named color. Unknown names leave the text untouched."""
    code = ANSI_COLORS.get(color)
    if not code or not text:
        return text
    return f"{code}{text}{RESET}"
