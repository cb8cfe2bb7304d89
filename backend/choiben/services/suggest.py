"""AI TODO suggestions fetched from the study-planning backend."""

import logging
from urllib.parse import quote

import requests

from ..schemas.suggestions import (
    ParsedSuggestion,
    ScrapboxSuggestionRequest,
    SuggestionRequest,
    SuggestionResponse,
)
from . import provider, todo_parser

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "TODOの生成に失敗しました"

class SuggestionError(Exception):
    def __init__(self, message: str = FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message

def _request(path: str, payload: dict, response_type: str) -> SuggestionResponse:
    try:
        data = provider.ai_backend_post(path, payload)
    except (requests.RequestException, ValueError) as e:
        logger.error("TODO generation failed for %s: %s", path, e)
        raise SuggestionError() from e
    if not isinstance(data, dict) or not isinstance(data.get("content"), str):
        logger.error("TODO generation returned no content for %s", path)
        raise SuggestionError()
    return SuggestionResponse(success=True, content=data["content"], response_type=response_type)

def generate_general_todo(req: SuggestionRequest) -> SuggestionResponse:
    return _request("/api/ai/todo", req.model_dump(), "general")

def generate_scrapbox_todo(project_name: str, req: ScrapboxSuggestionRequest) -> SuggestionResponse:
    if not project_name.strip():
        raise ValueError("プロジェクト名が指定されていません")
    path = f"/api/ai/scrapbox-todo/{quote(project_name, safe='')}"
    return _request(path, req.model_dump(), "scrapbox")

def suggest_and_parse(req: SuggestionRequest) -> ParsedSuggestion:
    resp = generate_general_todo(req)
    return ParsedSuggestion(**resp.model_dump(), sections=todo_parser.parse(resp.content))
