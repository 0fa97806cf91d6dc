"""
Line parser for PlainTasks todo buffers.

Main API:
    parse_content(content)  → Document
    parse_line(line)        → Project | Task | Comment | EmptyLine

Each line is classified by trying LINE_RULES in order and taking the first
rule that matches:

    1. project     Name:  [@tag ...]
    2. task        ☐ / ✔ / ✘  followed by whitespace and content
    3. comment     any other line with non-blank text
    4. empty_line  nothing but whitespace

The parser is total: every line yields exactly one node and no input raises.
"""

from typing import Callable, List, Optional, Tuple

from plaintasks.models.nodes import (
    GLYPH_STATUS,
    Comment,
    Document,
    EmptyLine,
    Node,
    Project,
    Task,
)
from plaintasks.parsers.tag_scanner import scan_content, scan_tag_list

PROJECT_TERMINATOR = ":"
LINE_TERMINATOR = "\n"

_INDENT_CHARS = " \t"

LineRule = Callable[[str, str, int], Optional[Node]]


# ---------------------------------------------------------------------------
# Indentation / line splitting
# ---------------------------------------------------------------------------

def split_lines(content: str) -> List[str]:
    """
    Split a buffer into logical lines.

    A terminator at the very end of the buffer closes the last line rather
    than opening a new one, so ``"a\\n"`` and ``"a"`` both have one line and
    ``""`` has none.
    """
    if not content:
        return []
    lines = content.split(LINE_TERMINATOR)
    if lines[-1] == "":
        lines.pop()
    return lines


def split_indent(line: str) -> Tuple[str, str]:
    """Return (indent, body) where indent is the leading run of spaces/tabs."""
    body = line.lstrip(_INDENT_CHARS)
    return line[: len(line) - len(body)], body


# ---------------------------------------------------------------------------
# Line rules
# ---------------------------------------------------------------------------

def _match_project(indent: str, body: str, line_number: int) -> Optional[Project]:
    if not body or body[0] in GLYPH_STATUS or body[0] == PROJECT_TERMINATOR:
        return None
    colon = body.find(PROJECT_TERMINATOR)
    if colon < 0:
        return None
    tags = scan_tag_list(body[colon + 1:])
    if tags is None:
        return None
    return Project(name=body[:colon], tags=tags, indent=indent, line_number=line_number)


def _match_task(indent: str, body: str, line_number: int) -> Optional[Task]:
    if not body or body[0] not in GLYPH_STATUS:
        return None
    rest = body[1:]
    content = rest.lstrip(_INDENT_CHARS)
    gap = rest[: len(rest) - len(content)]
    # Glyph glued to text ("☐foo") is not a task
    if content and not gap:
        return None
    return Task(
        status=GLYPH_STATUS[body[0]],
        content=scan_content(content),
        indent=indent,
        gap=gap,
        line_number=line_number,
    )


def _match_comment(indent: str, body: str, line_number: int) -> Optional[Comment]:
    if not body:
        return None
    return Comment(text=body, indent=indent, line_number=line_number)


def _match_empty_line(indent: str, body: str, line_number: int) -> EmptyLine:
    # Last rule, accepts anything; comment has already taken every non-blank body
    return EmptyLine(indent=indent, line_number=line_number)


# Order is precedence: first match wins.
LINE_RULES: Tuple[Tuple[str, LineRule], ...] = (
    ("project", _match_project),
    ("task", _match_task),
    ("comment", _match_comment),
    ("empty_line", _match_empty_line),
)


# ---------------------------------------------------------------------------
# Main parse API
# ---------------------------------------------------------------------------

def _classify(line: str, line_number: int) -> Tuple[str, Node]:
    indent, body = split_indent(line.replace("\r", ""))
    for name, rule in LINE_RULES:
        node = rule(indent, body, line_number)
        if node is not None:
            break
    return name, node


def classify_line(line: str) -> str:
    """Return the name of the LINE_RULES entry that claims this line."""
    return _classify(line, 0)[0]


def parse_line(line: str, line_number: int = 0) -> Node:
    """
    Parse a single line (without its terminator) into a node.

    Args:
        line: Line text; any ``\\r`` characters are ignored
        line_number: 0-based position stored on the node

    Returns:
        Project, Task, Comment or EmptyLine
    """
    return _classify(line, line_number)[1]


def parse_content(content: str) -> Document:
    """
    Parse a todo buffer into a Document.

    Args:
        content: Full buffer text using ``\\n`` line terminators

    Returns:
        Document with one node per line, in line order
    """
    return Document(
        nodes=tuple(
            parse_line(line, line_number)
            for line_number, line in enumerate(split_lines(content))
        )
    )
