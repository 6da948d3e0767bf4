from __future__ import annotations

ESC = "\x1b"


def foreground_style(r: int, g: int, b: int) -> str:
    """24-bit foreground color escape sequence."""
    return f"{ESC}[38;2;{r};{g};{b}m"


def background_style(r: int, g: int, b: int) -> str:
    """24-bit background color escape sequence."""
    return f"{ESC}[48;2;{r};{g};{b}m"


def reset_style() -> str:
    return f"{ESC}[0m"


def clear_line() -> str:
    """Clear from the cursor to the end of the line."""
    return f"{ESC}[K"
