"""Enumerations used across the domain package."""

from enum import Enum


class TextColor(str, Enum):
    """Named chat colors understood by game clients."""

    BLACK = "black"
    DARK_GRAY = "dark_gray"
    GRAY = "gray"
    WHITE = "white"
    YELLOW = "yellow"
    GOLD = "gold"
    RED = "red"
    GREEN = "green"
    AQUA = "aqua"
    BLUE = "blue"


class ClickAction(str, Enum):
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class HoverAction(str, Enum):
    SHOW_TEXT = "show_text"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
