"""
Test Configuration Module
"""

import copy
import re
from typing import Any

import pytest
import pytest_asyncio
from botocore.exceptions import ClientError
from httpx import ASGITransport, AsyncClient

from todo_service.api.deps import get_store_client
from todo_service.config import get_settings
from todo_service.main import app
from todo_service.repositories.dynamodb import DynamoDBTodoRepository

TABLE_NAME = "TodoTable"


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class FakeDynamoDBClient:
    """
    In-memory stand-in for a low-level boto3 DynamoDB client

    Holds one table; items are kept in attribute-value form
    (e.g. {"id": {"S": "1"}, "created": {"N": "0"}}), as the real client returns them.
    """

    def __init__(self, table_name: str = TABLE_NAME):
        self.table_name = table_name
        self.items: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _record(self, operation: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((operation, kwargs))
        if kwargs.get("TableName") != self.table_name:
            raise _client_error("ResourceNotFoundException", operation)

    def scan(self, **kwargs):
        self._record("scan", kwargs)
        items = list(self.items.values())
        limit = kwargs.get("Limit")
        if limit is not None:
            items = items[:limit]
        return {"Items": copy.deepcopy(items), "Count": len(items)}

    def query(self, **kwargs):
        self._record("query", kwargs)
        names = kwargs.get("ExpressionAttributeNames", {})
        values = kwargs.get("ExpressionAttributeValues", {})
        name, placeholder = (part.strip() for part in kwargs["KeyConditionExpression"].split("="))
        key = names.get(name, name)
        items = [item for item in self.items.values() if item.get(key) == values[placeholder]]
        limit = kwargs.get("Limit")
        if limit is not None:
            items = items[:limit]
        return {"Items": copy.deepcopy(items), "Count": len(items)}

    def put_item(self, **kwargs):
        self._record("put_item", kwargs)
        item = copy.deepcopy(kwargs["Item"])
        self.items[item["id"]["S"]] = item
        return {}

    def update_item(self, **kwargs):
        self._record("update_item", kwargs)
        key = kwargs["Key"]["id"]["S"]
        names = kwargs.get("ExpressionAttributeNames", {})
        values = kwargs.get("ExpressionAttributeValues", {})

        condition = kwargs.get("ConditionExpression")
        if condition:
            match = re.fullmatch(r"attribute_exists\((#?\w+)\)", condition)
            attribute = names.get(match.group(1), match.group(1))
            if key not in self.items or attribute not in self.items[key]:
                raise _client_error("ConditionalCheckFailedException", "UpdateItem")

        item = self.items.setdefault(key, {"id": {"S": key}})
        assignments = kwargs["UpdateExpression"].strip()[len("SET "):]
        for assignment in assignments.split(","):
            name, placeholder = (part.strip() for part in assignment.split("="))
            item[names.get(name, name)] = copy.deepcopy(values[placeholder])

        if kwargs.get("ReturnValues") == "ALL_NEW":
            return {"Attributes": copy.deepcopy(item)}
        return {}

    def delete_item(self, **kwargs):
        self._record("delete_item", kwargs)
        self.items.pop(kwargs["Key"]["id"]["S"], None)
        return {}


class FailingClient:
    """Client whose every call fails with the given AWS error code"""

    def __init__(self, code: str = "AccessDeniedException"):
        self.code = code

    def _fail(self, operation: str):
        raise _client_error(self.code, operation)

    def scan(self, **kwargs):
        self._fail("Scan")

    def query(self, **kwargs):
        self._fail("Query")

    def put_item(self, **kwargs):
        self._fail("PutItem")

    def update_item(self, **kwargs):
        self._fail("UpdateItem")

    def delete_item(self, **kwargs):
        self._fail("DeleteItem")


@pytest.fixture
def fake_client() -> FakeDynamoDBClient:
    return FakeDynamoDBClient()


@pytest.fixture
def todo_repo(fake_client) -> DynamoDBTodoRepository:
    return DynamoDBTodoRepository(fake_client, TABLE_NAME)


@pytest.fixture
def override_client():
    """Point the app at a given store client for the duration of a test"""

    def _override(store_client):
        app.dependency_overrides[get_store_client] = lambda: store_client

    yield _override
    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def client(fake_client, override_client):
    """HTTP client against the app, backed by fake_client"""
    get_settings.cache_clear()
    override_client(fake_client)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
