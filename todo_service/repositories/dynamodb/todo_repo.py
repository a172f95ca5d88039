"""
Todo Repository DynamoDB Implementation

Each operation is one round trip to a single table keyed by `id`.
boto3 is blocking, so calls run in a worker thread against the shared
(thread-safe) low-level client.
"""

import logging
from decimal import Decimal
from functools import partial
from typing import Any, Optional

import anyio
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from todo_service.common.errors import (
    InvariantViolationError,
    MalformedRecordError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from todo_service.common.time import from_epoch_millis, to_epoch_millis
from todo_service.domain.todo import Todo
from todo_service.repositories.todo_repo import TodoRepository

logger = logging.getLogger(__name__)

# Listing never returns more than this many Todos
MAX_LIST_LIMIT = 20

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


class DynamoDBTodoRepository(TodoRepository):
    """
    Todo Repository DynamoDB Implementation

    Stores `id`, `title`, `description` as strings and `created` as epoch milliseconds.
    """

    def __init__(self, client: Any, table_name: str, list_limit: int = MAX_LIST_LIMIT):
        """
        Initialize Repository

        Args:
            client: Low-level DynamoDB client
            table_name: Todo table name
            list_limit: Max items returned by get_all, between 1 and MAX_LIST_LIMIT

        Raises:
            ValueError: list_limit out of range
        """
        if not 1 <= list_limit <= MAX_LIST_LIMIT:
            raise ValueError(f"list_limit must be between 1 and {MAX_LIST_LIMIT}, got {list_limit}")
        self.client = client
        self.table_name = table_name
        self.list_limit = list_limit

    async def _call(self, operation: str, **kwargs) -> dict[str, Any]:
        """Run a blocking client call in a thread, converting SDK failures to StoreError"""
        fn = getattr(self.client, operation)
        try:
            return await anyio.to_thread.run_sync(
                partial(fn, TableName=self.table_name, **kwargs)
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            if error.get("Code") == "ConditionalCheckFailedException":
                raise
            logger.error("DynamoDB %s failed: %s", operation, str(e))
            raise StoreError(
                message=str(e),
                details={"operation": operation, "aws_code": error.get("Code")},
            ) from e
        except BotoCoreError as e:
            logger.error("DynamoDB %s failed: %s", operation, str(e))
            raise StoreError(message=str(e), details={"operation": operation}) from e

    def _serialize(self, values: dict[str, Any]) -> dict[str, Any]:
        """Convert Python values to DynamoDB attribute values"""
        return {k: _serializer.serialize(v) for k, v in values.items()}

    def _deserialize(self, item: dict[str, Any]) -> dict[str, Any]:
        """Convert DynamoDB attribute values to Python values"""
        try:
            return {k: _deserializer.deserialize(v) for k, v in item.items()}
        except (TypeError, AttributeError) as e:
            raise MalformedRecordError(message=f"Undecodable record: {e}") from e

    def _to_domain(self, raw: dict[str, Any]) -> Todo:
        """Convert a stored record to a Todo"""
        item = self._deserialize(raw)

        item_id = item.get("id")
        if not isinstance(item_id, str):
            raise MalformedRecordError(
                message="Record has no string attribute 'id'",
                details={"attribute": "id"},
            )
        for name in ("title", "description"):
            if not isinstance(item.get(name), str):
                raise MalformedRecordError(
                    message=f"Record {item_id} has no string attribute '{name}'",
                    details={"id": item_id, "attribute": name},
                )

        created = item.get("created")
        if not isinstance(created, Decimal):
            raise MalformedRecordError(
                message=f"Record {item_id} has no numeric attribute 'created'",
                details={"id": item_id, "attribute": "created"},
            )
        if not created.is_finite() or created != created.to_integral_value():
            raise MalformedRecordError(
                message=f"Unparsable created timestamp for {item_id}: {created}",
                details={"id": item_id, "attribute": "created"},
            )
        try:
            created_at = from_epoch_millis(int(created))
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedRecordError(
                message=f"Unparsable created timestamp for {item_id}: {created}",
                details={"id": item_id, "attribute": "created"},
            ) from e

        return Todo(
            id=item_id,
            title=item["title"],
            description=item["description"],
            created=created_at,
        )

    async def get_all(self) -> list[Todo]:
        """Scan the table, capped at list_limit items"""
        response = await self._call("scan", Limit=self.list_limit)
        items = response.get("Items", [])[: self.list_limit]
        return [self._to_domain(item) for item in items]

    async def get_by_id(self, id: str) -> Optional[Todo]:
        """Query by partition key; two results means the key is not unique"""
        response = await self._call(
            "query",
            KeyConditionExpression="#id = :id",
            ExpressionAttributeNames={"#id": "id"},
            ExpressionAttributeValues=self._serialize({":id": id}),
            Limit=2,
        )
        todos = [self._to_domain(item) for item in response.get("Items", [])]
        if len(todos) > 1:
            logger.critical("More than one item found for id %s", id)
            raise InvariantViolationError(
                message=f"More than one item found for id {id}",
                details={"id": id, "count": len(todos)},
            )
        return todos[0] if todos else None

    async def insert(self, todo: Todo) -> None:
        if not todo.id:
            raise ValidationError(
                message="Todo id must be generated before insert",
                code="missing_id",
            )
        await self._call(
            "put_item",
            Item=self._serialize(
                {
                    "id": todo.id,
                    "title": todo.title,
                    "description": todo.description,
                    "created": to_epoch_millis(todo.created),
                }
            ),
        )

    async def update(self, todo: Todo) -> Todo:
        """Conditional update: fails with NotFoundError instead of creating a partial record"""
        try:
            response = await self._call(
                "update_item",
                Key=self._serialize({"id": todo.id}),
                UpdateExpression="SET #title = :title, #description = :description",
                ConditionExpression="attribute_exists(#id)",
                ExpressionAttributeNames={
                    "#id": "id",
                    "#title": "title",
                    "#description": "description",
                },
                ExpressionAttributeValues=self._serialize(
                    {":title": todo.title, ":description": todo.description}
                ),
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            raise NotFoundError(
                message=f"Todo with id {todo.id} not found",
                code="todo_not_found",
            ) from e
        return self._to_domain(response["Attributes"])

    async def delete(self, id: str) -> None:
        await self._call("delete_item", Key=self._serialize({"id": id}))
