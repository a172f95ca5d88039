"""
Domain Model Module Initialization
"""

from todo_service.domain.response import ApiResponse
from todo_service.domain.todo import Todo, TodoCreate, TodoUpdate

__all__ = [
    "ApiResponse",
    "Todo",
    "TodoCreate",
    "TodoUpdate",
]
