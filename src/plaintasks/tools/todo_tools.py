"""
Todo language-service tools.

Core logic lives in handle_* functions (return dicts).
MCP wrappers in register_todo_tools() serialize to JSON strings.
"""

import json
import logging
import re
from datetime import datetime
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from plaintasks.models.nodes import (
    STATUS_GLYPHS,
    Comment,
    EmptyLine,
    Node,
    Project,
    Status,
    Tag,
    Task,
)
from plaintasks.parsers.tag_scanner import scan_content
from plaintasks.parsers.todo_parser import parse_content, split_lines
from plaintasks.utils.dates import DEFAULT_TIMESTAMP_FORMAT, timestamp
from plaintasks.utils.formatting import render_content

log = logging.getLogger(__name__)

# Always offered by tag completion, on top of tags already in the buffer
COMMON_TAGS = (
    "today", "high", "medium", "low", "critical",
    "done", "cancelled", "started", "est", "lasted",
)

_DONE_TAG = re.compile(r"\s*@done\([^)]+\)")
_CANCELLED_TAG = re.compile(r"\s*@cancelled\([^)]+\)")

_PENDING = STATUS_GLYPHS[Status.PENDING]


def _segment_to_dict(seg) -> dict:
    if isinstance(seg, Tag):
        return {"kind": "tag", "name": seg.name, "value": seg.value}
    return {"kind": "text", "text": seg.text}


def _node_to_dict(node: Node) -> dict:
    """Serialize a node to a JSON-serializable dict."""
    d = {"line_number": node.line_number, "indent": node.indent}
    if isinstance(node, Project):
        d.update(kind="project", name=node.name, tags=[_segment_to_dict(t) for t in node.tags])
    elif isinstance(node, Task):
        d.update(
            kind="task",
            status=node.status.value,
            text=node.text,
            content=[_segment_to_dict(s) for s in node.content],
        )
    elif isinstance(node, Comment):
        d.update(kind="comment", text=node.text)
    else:
        d["kind"] = "empty_line"
    return d


def _utf16_length(text: str) -> int:
    """Length in UTF-16 code units, the unit of an edit's ``character`` field."""
    return len(text.encode("utf-16-le")) // 2


def _line_edit(line: int, length: int, new_text: str) -> dict:
    """Edit replacing the content of ``line``, terminator excluded."""
    return {
        "range": {
            "start": {"line": line, "character": 0},
            "end": {"line": line, "character": length},
        },
        "new_text": new_text,
    }


def _action(title: str, kind: str, edit: dict, preferred: bool = False) -> dict:
    return {"title": title, "kind": kind, "is_preferred": preferred, "edit": edit}


def _with_tag(indent: str, status: Status, content: str, tag: str) -> str:
    body = f"{content} {tag}" if content else tag
    return f"{indent}{STATUS_GLYPHS[status]} {body}"


# ---------------------------------------------------------------------------
# Handler functions (return dicts, shared by MCP tools and REST API)
# ---------------------------------------------------------------------------


def handle_parse(content: str) -> dict:
    doc = parse_content(content)
    nodes = [_node_to_dict(n) for n in doc.nodes]
    counts = {
        "projects": len(doc.projects()),
        "comments": len(doc.comments()),
        "empty_lines": sum(1 for n in doc.nodes if isinstance(n, EmptyLine)),
    }
    for status in Status:
        counts[status.value] = len(doc.tasks(status))
    return {"nodes": nodes, "counts": counts}


def handle_tag_completions(content: str) -> List[dict]:
    """
    Completion items for ``@`` tags.

    Offers every tag name in the buffer plus COMMON_TAGS, sorted by name.
    Comment lines are scanned too, so tags jotted in notes are offered.
    """
    doc = parse_content(content)
    names = set(doc.tag_names())
    for comment in doc.comments():
        names.update(seg.name for seg in scan_content(comment.text) if isinstance(seg, Tag))
    names.update(COMMON_TAGS)
    return [
        {"label": f"@{name}", "insert_text": name, "kind": "keyword"}
        for name in sorted(names)
    ]


def handle_code_actions(
    content: str,
    *,
    line: int,
    now: Optional[datetime] = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> dict:
    """
    Code actions available on a single line.

    Args:
        content: Full buffer text
        line: 0-based line number
        now: Time used for @done / @cancelled stamps (default: now)
        timestamp_format: strftime format for the stamps

    Returns:
        {"line": line, "actions": [...]} or {"error": ...}
    """
    lines = split_lines(content)
    if line < 0 or line >= len(lines):
        return {"error": f"Line {line} is out of range (buffer has {len(lines)} lines)"}

    node = parse_content(content).nodes[line]
    # a CRLF terminator stays outside the replaced range
    length = _utf16_length(lines[line].rstrip("\r"))
    actions: List[dict] = []

    if isinstance(node, Task):
        body = render_content(node.content)
        if node.status == Status.PENDING:
            stamp = timestamp(now, timestamp_format)
            actions.append(_action(
                "Mark as Done", "quickfix",
                _line_edit(line, length, _with_tag(node.indent, Status.DONE, body, f"@done({stamp})")),
                preferred=True,
            ))
            actions.append(_action(
                "Mark as Cancelled", "quickfix",
                _line_edit(line, length, _with_tag(node.indent, Status.CANCELLED, body, f"@cancelled({stamp})")),
            ))
        else:
            pattern = _DONE_TAG if node.status == Status.DONE else _CANCELLED_TAG
            cleaned = pattern.sub("", body).strip()
            actions.append(_action(
                "Revert to Pending", "quickfix",
                _line_edit(line, length, f"{node.indent}{_PENDING} {cleaned}"),
                preferred=True,
            ))
    elif isinstance(node, (Comment, EmptyLine)):
        text = node.text if isinstance(node, Comment) else ""
        actions.append(_action(
            "Convert to Todo item", "refactor",
            _line_edit(line, length, f"{node.indent}{_PENDING} {text}"),
            preferred=True,
        ))

    below = {"line": line + 1, "character": 0}
    actions.append(_action(
        "Insert new Todo item below", "refactor",
        {"range": {"start": below, "end": dict(below)}, "new_text": f"{node.indent}{_PENDING} \n"},
    ))

    log.debug("Line %d (%s): %d code actions", line, type(node).__name__, len(actions))
    return {"line": line, "actions": actions}


# ---------------------------------------------------------------------------
# MCP tool registration (thin wrappers)
# ---------------------------------------------------------------------------


def register_todo_tools(mcp: FastMCP, *, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> None:
    """Register all todo MCP tools onto the FastMCP instance."""

    @mcp.tool()
    def todo_parse(content: str) -> str:
        """
        Parse a PlainTasks todo buffer.

        Lines ending in ":" are projects, lines starting with ☐ / ✔ / ✘ are
        pending / done / cancelled tasks, anything else is a comment or an
        empty line. Task content is split into text runs and @tag(value) tags.

        Args:
            content: Full buffer text

        Returns:
            JSON object with one node per line and per-kind counts
        """
        return json.dumps(handle_parse(content), indent=2, ensure_ascii=False)

    @mcp.tool()
    def todo_tag_completions(content: str) -> str:
        """
        List @tag completions for a buffer.

        Args:
            content: Full buffer text

        Returns:
            JSON array of completion items (label, insert_text, kind)
        """
        return json.dumps(handle_tag_completions(content), indent=2)

    @mcp.tool()
    def todo_code_actions(content: str, line: int) -> str:
        """
        List code actions for one line of a buffer.

        Pending tasks can be marked done or cancelled (stamped with the
        current time), done/cancelled tasks reverted to pending, and other
        lines converted to a todo. A new todo can always be inserted below.

        Args:
            content: Full buffer text
            line: 0-based line number

        Returns:
            JSON object with the actions and their text edits, or error message
        """
        return json.dumps(
            handle_code_actions(content, line=line, timestamp_format=timestamp_format),
            indent=2,
            ensure_ascii=False,
        )
