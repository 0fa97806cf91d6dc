from .dates import DEFAULT_TIMESTAMP_FORMAT, timestamp
from .formatting import render_content, render_document, render_node, render_tag

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "timestamp",
    "render_content",
    "render_document",
    "render_node",
    "render_tag",
]
