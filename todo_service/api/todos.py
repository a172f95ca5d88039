"""
Todo API

Provides CRUD endpoints for Todos. Every endpoint answers with the
`{code, message, data}` envelope, and the HTTP status follows `code`.
"""

import logging
from typing import Optional

from fastapi import APIRouter

from todo_service.api.deps import TodoRepoDep
from todo_service.common.errors import NotFoundError, StoreError
from todo_service.common.time import utc_now_ms
from todo_service.domain.response import ApiResponse
from todo_service.domain.todo import Todo, TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Todos"])


@router.get("/getTodos", response_model=ApiResponse[list[Todo]])
async def get_todos(repo: TodoRepoDep):
    """
    Get Todo List

    Returns at most TODO_LIST_LIMIT items, unordered.
    """
    logger.info("get_todos")
    try:
        todos = await repo.get_all()
    except StoreError as e:
        logger.error("get_todos failed: %s", e.message)
        return ApiResponse.failure(e.status_code, e.message, []).to_response()
    return ApiResponse.success(todos).to_response()


@router.post("/addTodo", response_model=ApiResponse[str])
async def add_todo(data: TodoCreate, repo: TodoRepoDep):
    """
    Create Todo

    The identifier and creation time are assigned here.
    """
    todo = Todo.new(data.title, data.description, utc_now_ms())
    todo.generate_id()
    logger.info("add_todo id=%s", todo.id)

    try:
        await repo.insert(todo)
    except StoreError as e:
        logger.error("add_todo failed: %s", e.message)
        return ApiResponse.failure(e.status_code, e.message, "").to_response()
    return ApiResponse.success(f"Todo inserted with ID: {todo.id}").to_response()


@router.get("/todo/{todo_id}", response_model=ApiResponse[Optional[Todo]])
async def get_todo(todo_id: str, repo: TodoRepoDep):
    """Get single Todo"""
    logger.info("get_todo id=%s", todo_id)
    try:
        todo = await repo.get_by_id(todo_id)
    except StoreError as e:
        logger.error("get_todo failed: %s", e.message)
        return ApiResponse.failure(e.status_code, e.message).to_response()

    if todo is None:
        return ApiResponse.failure(404, f"Todo with id {todo_id} not found").to_response()
    return ApiResponse.success(todo).to_response()


@router.put("/updateTodo", response_model=ApiResponse[Optional[Todo]])
async def update_todo(data: TodoUpdate, repo: TodoRepoDep):
    """
    Update Todo

    Only title and description change. Updating a missing Todo returns 404
    and creates nothing.
    """
    logger.info("update_todo id=%s", data.id)
    # created is ignored by the repository
    todo = Todo(id=data.id, title=data.title, description=data.description, created=utc_now_ms())
    try:
        updated = await repo.update(todo)
    except (NotFoundError, StoreError) as e:
        logger.error("update_todo failed: %s", e.message)
        return ApiResponse.failure(e.status_code, e.message).to_response()
    return ApiResponse.success(updated).to_response()


@router.delete("/todo/{todo_id}", response_model=ApiResponse[str])
async def delete_todo(todo_id: str, repo: TodoRepoDep):
    """
    Delete Todo

    Idempotent: deleting a missing Todo succeeds.
    """
    logger.info("delete_todo id=%s", todo_id)
    try:
        await repo.delete(todo_id)
    except StoreError as e:
        logger.error("delete_todo failed: %s", e.message)
        return ApiResponse.failure(e.status_code, e.message, "").to_response()
    return ApiResponse.success(f"Todo deleted with ID: {todo_id}").to_response()
