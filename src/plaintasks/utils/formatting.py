"""
Canonical rendering of parsed nodes back to todo markup.

Task, Comment and EmptyLine nodes keep their raw indentation, glyph gap and
text, so rendering reproduces the original line exactly (``\\r`` aside).
Projects render canonically: ``<indent><name>:`` followed by space-separated
tags when present.
"""

from typing import Iterable

from plaintasks.models.nodes import (
    Comment,
    Document,
    EmptyLine,
    Node,
    Project,
    Segment,
    Tag,
    Task,
)


def render_tag(tag: Tag) -> str:
    """
    Render a single tag.

    Returns:
        "@name" or "@name(value)"
    """
    if tag.value is None:
        return f"@{tag.name}"
    return f"@{tag.name}({tag.value})"


def render_content(segments: Iterable[Segment]) -> str:
    return "".join(
        render_tag(seg) if isinstance(seg, Tag) else seg.text for seg in segments
    )


def render_node(node: Node) -> str:
    """Render one node as a line without its terminator."""
    if isinstance(node, Task):
        return f"{node.indent}{node.glyph}{node.gap}{render_content(node.content)}"
    if isinstance(node, Project):
        line = f"{node.indent}{node.name}:"
        if node.tags:
            line += " " + " ".join(render_tag(tag) for tag in node.tags)
        return line
    if isinstance(node, Comment):
        return f"{node.indent}{node.text}"
    if isinstance(node, EmptyLine):
        return node.indent
    raise TypeError(f"not a document node: {node!r}")


def render_document(document: Document) -> str:
    """Render every node, each followed by a newline."""
    return "".join(render_node(node) + "\n" for node in document.nodes)
