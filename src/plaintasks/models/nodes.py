"""
Document tree for PlainTasks todo files.

A parsed file is a flat Document of line nodes in source order. Every node
carries the raw indentation of its line; indentation is recorded but never
used to build a hierarchy. Nodes are frozen once the parser produces them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union


class Status(str, Enum):
    PENDING = "pending"
    DONE = "done"
    CANCELLED = "cancelled"


STATUS_GLYPHS: Dict[Status, str] = {
    Status.PENDING: "☐",
    Status.DONE: "✔",
    Status.CANCELLED: "✘",
}

GLYPH_STATUS: Dict[str, Status] = {v: k for k, v in STATUS_GLYPHS.items()}


@dataclass(frozen=True)
class Tag:
    """An ``@name`` or ``@name(value)`` annotation. Value is opaque text."""

    name: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Text:
    """A run of plain characters between tags."""

    text: str


Segment = Union[Text, Tag]


@dataclass(frozen=True)
class Project:
    """A ``Name:`` header line, optionally followed by tags."""

    name: str
    tags: Tuple[Tag, ...] = ()
    indent: str = ""
    line_number: int = 0

    @property
    def indent_depth(self) -> int:
        return len(self.indent)


@dataclass(frozen=True)
class Task:
    """
    A status glyph line.

    ``content`` alternates Text and Tag segments; two Text runs are never
    adjacent. ``gap`` is the raw whitespace between the glyph and the content.
    """

    status: Status
    content: Tuple[Segment, ...] = ()
    indent: str = ""
    gap: str = " "
    line_number: int = 0

    @property
    def glyph(self) -> str:
        return STATUS_GLYPHS[self.status]

    @property
    def indent_depth(self) -> int:
        """Number of raw whitespace characters before the glyph."""
        return len(self.indent)

    @property
    def tags(self) -> Tuple[Tag, ...]:
        return tuple(seg for seg in self.content if isinstance(seg, Tag))

    @property
    def text(self) -> str:
        """Concatenated Text runs, tags left out."""
        return "".join(seg.text for seg in self.content if isinstance(seg, Text))

    def has_tag(self, name: str) -> bool:
        return any(tag.name == name for tag in self.tags)


@dataclass(frozen=True)
class Comment:
    """Free-form line that is neither a project nor a task."""

    text: str
    indent: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class EmptyLine:
    indent: str = ""
    line_number: int = 0


Node = Union[Project, Task, Comment, EmptyLine]


@dataclass(frozen=True)
class Document:
    """
    A fully parsed todo buffer.

    ``nodes`` holds exactly one node per input line, in line order.
    """

    nodes: Tuple[Node, ...] = ()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def tasks(self, status: Optional[Status] = None) -> List[Task]:
        """Return all tasks, optionally only those with the given status."""
        return [
            node for node in self.nodes
            if isinstance(node, Task) and (status is None or node.status == status)
        ]

    def projects(self) -> List[Project]:
        return [node for node in self.nodes if isinstance(node, Project)]

    def comments(self) -> List[Comment]:
        return [node for node in self.nodes if isinstance(node, Comment)]

    def all_tags(self) -> List[Tag]:
        """Every tag on a project or task line, in source order."""
        result: List[Tag] = []
        for node in self.nodes:
            if isinstance(node, (Project, Task)):
                result.extend(node.tags)
        return result

    def tag_names(self) -> List[str]:
        """Distinct tag names in first-seen order."""
        seen: Dict[str, None] = {}
        for tag in self.all_tags():
            seen.setdefault(tag.name, None)
        return list(seen)
