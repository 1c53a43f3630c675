from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Node:
    """A display-tree element: a tag, its properties, and ordered children.

    Children are either nodes or plain text.
    """

    tag: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: Tuple["Node | str", ...] = ()

    def find_all(self, tag: str) -> list:
        found = [self] if self.tag == tag else []
        for child in self.children:
            if isinstance(child, Node):
                found.extend(child.find_all(tag))
        return found

    def find_by_class(self, class_name: str) -> list:
        found = []
        if class_name in str(self.props.get("class", "")).split():
            found.append(self)
        for child in self.children:
            if isinstance(child, Node):
                found.extend(child.find_by_class(class_name))
        return found

    def text(self) -> str:
        parts = []
        for child in self.children:
            parts.append(child.text() if isinstance(child, Node) else child)
        return "".join(parts)


def h(tag: str, props: Optional[Dict[str, Any]] = None, *children) -> Node:
    flat = []
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(c for c in child if c is not None and c is not False)
        else:
            flat.append(child)
    return Node(tag=tag, props=dict(props or {}), children=tuple(flat))
