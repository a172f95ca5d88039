"""
API Router Module Initialization
"""

from todo_service.api.system import router as system_router
from todo_service.api.todos import router as todos_router

__all__ = [
    "system_router",
    "todos_router",
]
