"""
Data Access Layer Module Initialization
"""

from todo_service.repositories.todo_repo import TodoRepository

__all__ = [
    "TodoRepository",
]
