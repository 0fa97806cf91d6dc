from .todo_tools import (
    handle_code_actions,
    handle_parse,
    handle_tag_completions,
    register_todo_tools,
)

__all__ = [
    "handle_code_actions",
    "handle_parse",
    "handle_tag_completions",
    "register_todo_tools",
]
