"""Library-independent rich text."""

from .components import ClickEvent, HoverEvent, TextComponent, TextComponentBuilder

__all__ = ["ClickEvent", "HoverEvent", "TextComponent", "TextComponentBuilder"]
