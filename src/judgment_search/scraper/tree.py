"""Small tree-query helpers decoupled from any particular markup engine.

Any node exposing ``name``, ``parent``, ``children`` and ``get(attr)`` works:
BeautifulSoup ``Tag`` objects do, and so do the lightweight nodes used in the
tests. Text nodes are recognised by having no ``name``.
"""
from __future__ import annotations
from typing import Any, Callable, Iterator, List, Optional

Predicate = Callable[[Any], bool]


def is_element(node: Any) -> bool:
    return getattr(node, "name", None) is not None and hasattr(node, "get")


def tag_is(*names: str) -> Predicate:
    wanted = {n.lower() for n in names}

    def pred(node: Any) -> bool:
        return is_element(node) and str(node.name).lower() in wanted
    return pred


def has_attr(attr: str, contains: Optional[str] = None, ignore_case: bool = True) -> Predicate:
    """Match elements carrying ``attr``; optionally require a substring in its raw value."""
    needle = contains.lower() if (contains is not None and ignore_case) else contains

    def pred(node: Any) -> bool:
        if not is_element(node):
            return False
        value = node.get(attr)
        if value is None:
            return False
        if needle is None:
            return True
        value = str(value)
        return needle in (value.lower() if ignore_case else value)
    return pred


def all_of(*preds: Predicate) -> Predicate:
    def pred(node: Any) -> bool:
        return all(p(node) for p in preds)
    return pred


def select_all(root: Any, pred: Predicate) -> Iterator[Any]:
    """Yield descendants of ``root`` matching ``pred`` in document order."""
    stack: List[Any] = list(reversed(list(getattr(root, "children", None) or [])))
    while stack:
        node = stack.pop()
        if pred(node):
            yield node
        kids = getattr(node, "children", None) if is_element(node) else None
        if kids:
            stack.extend(reversed(list(kids)))


def closest(node: Any, pred: Predicate) -> Optional[Any]:
    """Nearest ancestor of ``node`` (the node itself excluded) matching ``pred``."""
    cur = getattr(node, "parent", None)
    while cur is not None:
        if pred(cur):
            return cur
        cur = getattr(cur, "parent", None)
    return None


def child_elements(node: Any, pred: Predicate) -> List[Any]:
    return [c for c in (getattr(node, "children", None) or []) if pred(c)]


def text_of(node: Any) -> str:
    """Text content with element boundaries (e.g. <br>) kept as single spaces."""
    if node is None:
        return ""
    getter = getattr(node, "get_text", None)
    if getter is not None:
        return getter(" ")
    if not is_element(node):
        return str(node)
    return " ".join(text_of(c) for c in (getattr(node, "children", None) or []))


__all__ = [
    'Predicate', 'is_element', 'tag_is', 'has_attr', 'all_of', 'select_all', 'closest', 'child_elements', 'text_of',
]
