"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated, Any

from fastapi import Depends

from todo_service.config import get_settings
from todo_service.db.dynamodb import get_dynamodb_client
from todo_service.repositories.dynamodb import DynamoDBTodoRepository
from todo_service.repositories.todo_repo import TodoRepository


def get_store_client() -> Any:
    """
    Get the shared DynamoDB client

    Returns:
        Thread-safe low-level client created at startup
    """
    return get_dynamodb_client()


# ============ Repository Dependencies ============

def get_todo_repo(client: Annotated[Any, Depends(get_store_client)]) -> TodoRepository:
    """Get Todo Repository bound to the shared client"""
    settings = get_settings()
    return DynamoDBTodoRepository(
        client,
        settings.TODO_TABLE_NAME,
        list_limit=settings.TODO_LIST_LIMIT,
    )


# Dependency type alias
TodoRepoDep = Annotated[TodoRepository, Depends(get_todo_repo)]
