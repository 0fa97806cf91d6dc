"""
Tokenizer for task and project content.

Content is scanned left to right as a two-state machine:

    in text  -- characters accumulate into the current Text run
    at "@"   -- try to match a whole tag; on success flush the run and emit
                the Tag, otherwise the "@" joins the current Text run

Lookahead never goes past the closing ")" of a value group, so scanning is
linear in the length of the line and never backtracks.
"""

import string
from typing import List, Optional, Tuple

from plaintasks.models.nodes import Segment, Tag, Text

TAG_MARKER = "@"
VALUE_OPEN = "("
VALUE_CLOSE = ")"

_NAME_START = frozenset(string.ascii_letters)
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_LINE_BREAKS = frozenset("\r\n")
_BLANK = " \t"


def match_tag(text: str, pos: int) -> Tuple[Optional[Tag], int]:
    """
    Try to match a tag starting at ``text[pos]``.

    Grammar: ``@`` name ``[A-Za-z][A-Za-z0-9_-]*`` then an optional
    ``(value)`` group where value is ``[^)\\r\\n]+``. A value group that is
    empty or not closed on this line is not part of the tag: the tag ends
    after its name and the ``(`` is left for the caller.

    Returns:
        (tag, end) on success, where end is the index after the tag;
        (None, pos) when no tag starts here.
    """
    end = len(text)
    if pos >= end or text[pos] != TAG_MARKER:
        return None, pos

    name_end = pos + 1
    if name_end >= end or text[name_end] not in _NAME_START:
        return None, pos
    while name_end < end and text[name_end] in _NAME_CHARS:
        name_end += 1
    name = text[pos + 1:name_end]

    if name_end < end and text[name_end] == VALUE_OPEN:
        close = name_end + 1
        while close < end and text[close] != VALUE_CLOSE and text[close] not in _LINE_BREAKS:
            close += 1
        if close < end and text[close] == VALUE_CLOSE and close > name_end + 1:
            return Tag(name, text[name_end + 1:close]), close + 1

    return Tag(name), name_end


def scan_content(text: str) -> Tuple[Segment, ...]:
    """
    Split task content into alternating Text and Tag segments.

    Scanning stops at the first ``\\n``; ``\\r`` is skipped wherever it
    appears. Adjacent non-tag characters always end up in a single Text run.
    """
    segments: List[Segment] = []
    run: List[str] = []
    pos = 0
    end = len(text)

    while pos < end:
        char = text[pos]
        if char == "\n":
            break
        if char == "\r":
            pos += 1
            continue
        if char == TAG_MARKER:
            tag, tag_end = match_tag(text, pos)
            if tag is not None:
                if run:
                    segments.append(Text("".join(run)))
                    run = []
                segments.append(tag)
                pos = tag_end
                continue
        run.append(char)
        pos += 1

    if run:
        segments.append(Text("".join(run)))
    return tuple(segments)


def scan_tag_list(text: str) -> Optional[Tuple[Tag, ...]]:
    """
    Parse the tail of a project line after its colon.

    Blank tails give ``()``. Otherwise the tail must start with whitespace
    and hold nothing but tags separated by optional spaces or tabs.

    Returns:
        The tags in order, or None if the tail is not a tag list.
    """
    if not text.strip(_BLANK + "\r"):
        return ()
    if text[0] not in _BLANK:
        return None

    tags: List[Tag] = []
    for seg in scan_content(text):
        if isinstance(seg, Tag):
            tags.append(seg)
        elif seg.text.strip(_BLANK):
            return None
    return tuple(tags)
