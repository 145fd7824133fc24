"""Minimal immutable UI tree used by the product grid controls.

Components build ``Element`` trees; the host decides how to draw them.
Two hosts exist: ``render_html`` for the admin pages and ``render_rich``
for the terminal product grid.  ``Translation`` and ``IconButton`` are
leaves whose look belongs to the host, not to the component.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Callable, Union

from rich.text import Text

Translate = Callable[[str, str], str]


def default_translate(i18n_key: str, default_value: str) -> str:
    return default_value


@dataclass(frozen=True)
class Translation:
    """Localised text, resolved by the host's translator."""

    i18n_key: str
    default_value: str


@dataclass(frozen=True)
class IconButton:
    icon: str
    on_icon: str
    status: str


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: dict[str, str | bool] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    @property
    def classes(self) -> list[str]:
        value = self.attrs.get("class", "")
        return value.split() if isinstance(value, str) else []

    def walk(self):
        """Yield this element and every descendant node, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()
            else:
                yield child

    def find(self, predicate: Callable[[Node], bool]) -> Node | None:
        return next((node for node in self.walk() if predicate(node)), None)


Node = Union[Element, Translation, IconButton]


# ---------------------------------------------------------------------------
# HTML host
# ---------------------------------------------------------------------------


def _html_attrs(attrs: dict[str, str | bool]) -> str:
    parts = []
    for name, value in attrs.items():
        if value is True:
            parts.append(f" {name}")
        elif value is False:
            continue
        else:
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


_VOID_TAGS = {"input", "br", "img"}


def render_html(node: Node, translate: Translate = default_translate) -> str:
    """Serialise *node* to an HTML string."""
    if isinstance(node, Translation):
        return escape(translate(node.i18n_key, node.default_value))
    if isinstance(node, IconButton):
        return (
            f'<button type="button" class="rui btn btn-default flat icon-button"'
            f' data-icon="{escape(node.icon)}" data-on-icon="{escape(node.on_icon)}"'
            f' data-status="{escape(node.status)}"></button>'
        )
    attrs = _html_attrs(node.attrs)
    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = "".join(render_html(child, translate) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# ---------------------------------------------------------------------------
# Terminal host
# ---------------------------------------------------------------------------


def badge_style(classes: list[str]) -> str:
    """Return a consistent badge style for the bootstrap badge variants."""
    if "badge-danger" in classes:
        return "bold #ffffff on #b23a48"
    if "badge-info" in classes:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def render_rich(node: Node, translate: Translate = default_translate) -> Text:
    """Render *node* as a single line of terminal text."""
    text = Text()
    _append_rich(text, node, translate, style="")
    return text


def _append_rich(text: Text, node: Node, translate: Translate, style: str) -> None:
    if isinstance(node, Translation):
        label = translate(node.i18n_key, node.default_value)
        text.append(f" {label} " if style else label, style=style)
        return
    if isinstance(node, IconButton):
        if text:
            text.append(" ")
        text.append("◉", style="cyan" if node.status == "info" else "")
        return
    if node.tag == "input" and node.attrs.get("type") == "checkbox":
        text.append("[x]" if node.attrs.get("checked") is True else "[ ]")
        return
    if node.tag == "span" and "badge" in node.classes:
        if text:
            text.append(" ")
        style = badge_style(node.classes)
    for child in node.children:
        _append_rich(text, child, translate, style)
