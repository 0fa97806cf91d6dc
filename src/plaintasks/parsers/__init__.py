from .todo_parser import LINE_RULES, classify_line, parse_content, parse_line, split_lines
from .tag_scanner import match_tag, scan_content, scan_tag_list

__all__ = [
    "LINE_RULES",
    "classify_line",
    "parse_content",
    "parse_line",
    "split_lines",
    "match_tag",
    "scan_content",
    "scan_tag_list",
]
