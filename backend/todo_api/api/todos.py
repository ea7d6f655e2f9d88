# backend/todo_api/api/todos.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from todo_api import schemas
from todo_api.db.session import get_db
from todo_api.db.store import SqlTodoStore
from todo_api.services.todos import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


def get_todo_service(request: Request, db: Session = Depends(get_db)) -> TodoService:
    """Wire a TodoService over the request-scoped session and the app's analytics."""
    return TodoService(SqlTodoStore(db), analytics=request.app.state.analytics)


@router.get("", response_model=list[schemas.TodoRead])
def list_todos(
    service: TodoService = Depends(get_todo_service),
) -> list[schemas.TodoRead]:
    return [schemas.TodoRead.model_validate(todo) for todo in service.find_all()]


@router.post("", response_model=schemas.TodoRead)
def create_todo(
    payload: schemas.TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> schemas.TodoRead:
    todo = service.create(payload.name)
    return schemas.TodoRead.model_validate(todo)
