"""
DynamoDB Repository Implementation Module Initialization
"""

from todo_service.repositories.dynamodb.todo_repo import DynamoDBTodoRepository

__all__ = [
    "DynamoDBTodoRepository",
]
