"""Nested UI terms describing dialog contents."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Tuple

ID_TAG = "id"


class Term:
    """A node of a UI term tree: a tag plus an ordered tuple of children."""

    __slots__ = ("value", "params")

    def __init__(self, value: str, *params: Any) -> None:
        self.value = value
        self.params: Tuple[Any, ...] = params

    def __iter__(self) -> Iterator[Any]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.value == other.value and self.params == other.params

    def __hash__(self) -> int:
        return hash((self.value, self.params))

    def __repr__(self) -> str:
        args = ", ".join(repr(param) for param in self.params)
        return f"{self.value}({args})"


def ui_term(tag: str) -> Callable[..., Term]:
    """Return a constructor building terms tagged with *tag*."""

    def build(*params: Any) -> Term:
        return Term(tag, *params)

    build.__name__ = tag
    build.__qualname__ = tag
    return build


Id = ui_term(ID_TAG)
Opt = ui_term("opt")
Item = ui_term("item")
HBox = ui_term("HBox")
VBox = ui_term("VBox")
Frame = ui_term("Frame")
Label = ui_term("Label")
PushButton = ui_term("PushButton")
InputField = ui_term("InputField")
CheckBox = ui_term("CheckBox")
ReplacePoint = ui_term("ReplacePoint")
Empty = ui_term("Empty")


def collect_ids(term: Any) -> List[Any]:
    """Return ids annotated anywhere inside *term*, in first-seen order.

    Leaves that are not terms are ignored. Each id appears once.
    """

    found: List[Any] = []

    def visit(node: Any) -> None:
        if not isinstance(node, Term):
            return
        if node.value == ID_TAG and node.params:
            value = node.params[0]
            if value not in found:
                found.append(value)
        for child in node.params:
            visit(child)

    visit(term)
    return found


def item_pairs(items: Any) -> List[Tuple[Any, Any]]:
    """Normalize ``Item(Id(id), text)`` terms or ``(id, text)`` pairs to pairs."""

    pairs: List[Tuple[Any, Any]] = []
    for entry in items or []:
        if isinstance(entry, Term) and entry.value == "item":
            if len(entry.params) < 2:
                continue
            key, text = entry.params[0], entry.params[1]
            if isinstance(key, Term) and key.value == ID_TAG and key.params:
                key = key.params[0]
            pairs.append((key, text))
        else:
            key, text = entry
            pairs.append((key, text))
    return pairs
