"""
Store Module Initialization
"""

from todo_service.db.dynamodb import (
    DynamoDBConfig,
    close_dynamodb,
    create_dynamodb_client,
    ensure_todo_table,
    get_dynamodb_client,
    init_dynamodb,
    setup_dynamodb,
)

__all__ = [
    "DynamoDBConfig",
    "close_dynamodb",
    "create_dynamodb_client",
    "ensure_todo_table",
    "get_dynamodb_client",
    "init_dynamodb",
    "setup_dynamodb",
]
