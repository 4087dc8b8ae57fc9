# RestoOPS_V1/console_style.py
import os

# https://no-color.org : any non-empty value disables ANSI codes
_COLOR_ENABLED = not os.environ.get("NO_COLOR")


def _wrap(code: str, text: str) -> str:
    if not _COLOR_ENABLED:
        return text
    return f"\033[{code}m{text}\033[0m"


def bold(text: str) -> str:
    return _wrap("1", text)


def cyan(text: str) -> str:
    return _wrap("96", text)


def green(text: str) -> str:
    return _wrap("92", text)


def red(text: str) -> str:
    return _wrap("91", text)


def yellow(text: str) -> str:
    return _wrap("93", text)


def title(text: str) -> str:
    """Section header used by the console menus: `--- Text ---` in bold cyan."""
    return bold(cyan(f"--- {text} ---"))
