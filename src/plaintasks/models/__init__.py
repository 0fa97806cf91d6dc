from .nodes import (
    GLYPH_STATUS,
    STATUS_GLYPHS,
    Comment,
    Document,
    EmptyLine,
    Node,
    Project,
    Segment,
    Status,
    Tag,
    Task,
    Text,
)

__all__ = [
    "GLYPH_STATUS",
    "STATUS_GLYPHS",
    "Comment",
    "Document",
    "EmptyLine",
    "Node",
    "Project",
    "Segment",
    "Status",
    "Tag",
    "Task",
    "Text",
]
