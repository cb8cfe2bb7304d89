from fastapi import APIRouter, HTTPException
from ...schemas.suggestions import (
    ParsedSuggestion,
    ScrapboxSuggestionRequest,
    SuggestionRequest,
    SuggestionResponse,
)
from ...services.suggest import (
    SuggestionError,
    generate_scrapbox_todo,
    suggest_and_parse,
)

router = APIRouter()

def _error(status_code: int, message: str) -> HTTPException:
    detail = SuggestionResponse(success=False, content=message, response_type="error")
    return HTTPException(status_code=status_code, detail=detail.model_dump())

@router.post("/ai/todo", response_model=ParsedSuggestion)
def general_todo(body: SuggestionRequest):
    try:
        return suggest_and_parse(body)
    except SuggestionError as e:
        raise _error(502, e.message)

@router.post("/ai/scrapbox-todo/{project_name}", response_model=SuggestionResponse)
def scrapbox_todo(project_name: str, body: ScrapboxSuggestionRequest):
    try:
        return generate_scrapbox_todo(project_name, body)
    except ValueError as e:
        raise _error(400, str(e))
    except SuggestionError as e:
        raise _error(502, e.message)
