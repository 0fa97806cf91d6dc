"""REST API routes for the todo language service."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from plaintasks.tools.todo_tools import (
    handle_code_actions,
    handle_parse,
    handle_tag_completions,
)
from plaintasks.utils.dates import DEFAULT_TIMESTAMP_FORMAT


# ---------------------------------------------------------------------------
# Request body models
# ---------------------------------------------------------------------------


class ContentBody(BaseModel):
    content: str


class CodeActionBody(BaseModel):
    content: str
    line: int


def register_routes(
    app_router: APIRouter, *, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> None:
    """Attach todo REST routes to the router."""

    @app_router.post("/parse")
    def parse(body: ContentBody):
        return handle_parse(body.content)

    @app_router.post("/completions")
    def completions(body: ContentBody):
        return handle_tag_completions(body.content)

    @app_router.post("/code-actions")
    def code_actions(body: CodeActionBody):
        result = handle_code_actions(
            body.content, line=body.line, timestamp_format=timestamp_format
        )
        if "error" in result:
            raise HTTPException(status_code=404, detail=result["error"])
        return result
