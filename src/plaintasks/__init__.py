"""
PlainTasks todo-list parser and language-service tools.

    from plaintasks import parse_content
    doc = parse_content("Work:\n  ☐ call @person(Alice)\n")
"""

from plaintasks.models.nodes import (
    Comment,
    Document,
    EmptyLine,
    Project,
    Status,
    Tag,
    Task,
    Text,
)
from plaintasks.parsers.todo_parser import classify_line, parse_content, parse_line
from plaintasks.utils.formatting import render_document, render_node

__all__ = [
    "Comment",
    "Document",
    "EmptyLine",
    "Project",
    "Status",
    "Tag",
    "Task",
    "Text",
    "classify_line",
    "parse_content",
    "parse_line",
    "render_document",
    "render_node",
]
