from fastapi import APIRouter, HTTPException
from typing import List
from ...schemas.todos import CreationRecord, ParseIn, ParseOut, RecordsIn
from ...services import todo_parser

router = APIRouter()

@router.post("/todos/parse", response_model=ParseOut)
def parse_todos(body: ParseIn):
    sections = todo_parser.parse(body.content)
    tasks = todo_parser.flatten(sections)
    records = [todo_parser.adapt(t) for t in tasks]
    return ParseOut(sections=sections, tasks=tasks, records=records)

@router.post("/todos/records", response_model=List[CreationRecord])
def creation_records(body: RecordsIn):
    records = todo_parser.to_creation_records(body.content, body.keys)
    if not records:
        raise HTTPException(status_code=400, detail="追加するTODOを選択してください")
    return records
