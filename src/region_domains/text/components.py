"""Rich text components.

A small immutable model of styled, interactive chat text: each component
has content, an optional color, optional hover text and an optional
click action, plus child components rendered after it.  Components are
independent of any client library; ``to_json`` emits the chat-component
dict game clients accept.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from region_domains.core.enums import ClickAction, HoverAction, TextColor


class ClickEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: ClickAction
    value: str

    @classmethod
    def copy_to_clipboard(cls, value: str) -> "ClickEvent":
        return cls(action=ClickAction.COPY_TO_CLIPBOARD, value=value)


class HoverEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: HoverAction = HoverAction.SHOW_TEXT
    value: "TextComponent"

    @classmethod
    def show_text(cls, text: "TextComponent") -> "HoverEvent":
        return cls(action=HoverAction.SHOW_TEXT, value=text)


class TextComponent(BaseModel):
    """Immutable styled text segment with children."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    color: TextColor | None = None
    hover: HoverEvent | None = None
    click: ClickEvent | None = None
    children: tuple["TextComponent", ...] = Field(default_factory=tuple)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, content: str, color: TextColor | None = None) -> "TextComponent":
        return cls(content=content, color=color)

    @classmethod
    def newline(cls) -> "TextComponent":
        return cls(content="\n")

    @classmethod
    def builder(cls, content: str = "") -> "TextComponentBuilder":
        return TextComponentBuilder(content)

    def append(self, other: "TextComponent") -> "TextComponent":
        """Return a copy with *other* added as the last child."""
        return self.model_copy(update={"children": self.children + (other,)})

    def hover_text(self, text: "TextComponent") -> "TextComponent":
        return self.model_copy(update={"hover": HoverEvent.show_text(text)})

    def copy_on_click(self, value: str) -> "TextComponent":
        return self.model_copy(update={"click": ClickEvent.copy_to_clipboard(value)})

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def iter_segments(self):
        """Yield this component and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_segments()

    def to_plain(self) -> str:
        """Flatten visible content, dropping styles and events."""
        return "".join(seg.content for seg in self.iter_segments())

    def to_json(self) -> dict[str, Any]:
        """Render as a client chat component."""
        out: dict[str, Any] = {"text": self.content}
        if self.color is not None:
            out["color"] = self.color.value
        if self.hover is not None:
            out["hoverEvent"] = {
                "action": self.hover.action.value,
                "contents": self.hover.value.to_json(),
            }
        if self.click is not None:
            out["clickEvent"] = {
                "action": self.click.action.value,
                "value": self.click.value,
            }
        if self.children:
            out["extra"] = [child.to_json() for child in self.children]
        return out

    def __str__(self) -> str:
        return self.to_plain()


class TextComponentBuilder:
    """Mutable accumulator producing an immutable ``TextComponent``."""

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._children: list[TextComponent] = []

    def append(self, component: TextComponent) -> "TextComponentBuilder":
        self._children.append(component)
        return self

    def build(self) -> TextComponent:
        return TextComponent(content=self._content, children=tuple(self._children))


HoverEvent.model_rebuild()
TextComponent.model_rebuild()
