"""
DynamoDB Connection Management Module

Provides the DynamoDB client lifecycle for the Todo table.
The low-level client is built once at startup and shared by every request;
boto3 clients are thread safe, resources are not, so no resource is kept.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import anyio
import boto3
from botocore.exceptions import ClientError

from todo_service.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Global DynamoDB client instance
_dynamodb_client: Optional[Any] = None


@dataclass(frozen=True)
class DynamoDBConfig:
    """
    Store Client Configuration

    Credentials left as None fall back to the boto3 default credential chain.
    """

    region_name: str
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    endpoint_url: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoDBConfig":
        return cls(
            region_name=settings.AWS_REGION,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            aws_session_token=settings.AWS_SESSION_TOKEN,
            endpoint_url=settings.DYNAMODB_ENDPOINT_URL,
        )


def create_dynamodb_client(config: DynamoDBConfig) -> Any:
    """
    Build a low-level DynamoDB client

    Credentials are handed to a dedicated boto3 session, never written to os.environ.

    Args:
        config: Store client configuration

    Returns:
        botocore DynamoDB client
    """
    session = boto3.session.Session(
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        aws_session_token=config.aws_session_token,
        region_name=config.region_name,
    )
    return session.client("dynamodb", endpoint_url=config.endpoint_url)


def ensure_todo_table(client: Any, table_name: str) -> None:
    """
    Create the Todo table if it does not exist yet

    The table has a single string partition key `id` and no secondary indexes.
    Blocks until the table is active.

    Args:
        client: DynamoDB client
        table_name: Table name
    """
    try:
        client.describe_table(TableName=table_name)
        logger.info("DynamoDB table already exists: %s", table_name)
        return
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") != "ResourceNotFoundException":
            raise

    logger.info("Creating DynamoDB table: %s", table_name)
    client.create_table(
        TableName=table_name,
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(TableName=table_name)


def setup_dynamodb() -> None:
    """
    Initialize DynamoDB Connection (blocking)

    Used directly at Lambda cold start, and through init_dynamodb() by the ASGI lifespan.
    """
    global _dynamodb_client

    if _dynamodb_client is not None:
        logger.warning("DynamoDB client already initialized")
        return

    settings = get_settings()
    config = DynamoDBConfig.from_settings(settings)

    client = create_dynamodb_client(config)
    if settings.DYNAMODB_CREATE_TABLE:
        ensure_todo_table(client, settings.TODO_TABLE_NAME)

    _dynamodb_client = client
    logger.info(
        "DynamoDB initialized: region=%s endpoint=%s table=%s",
        config.region_name,
        config.endpoint_url or "default",
        settings.TODO_TABLE_NAME,
    )


async def init_dynamodb() -> None:
    """
    Initialize DynamoDB Connection

    Should be called during application startup.
    """
    await anyio.to_thread.run_sync(setup_dynamodb)


async def close_dynamodb() -> None:
    """
    Close DynamoDB Connection

    Should be called during application shutdown.
    """
    global _dynamodb_client

    if _dynamodb_client is None:
        return

    _dynamodb_client.close()
    _dynamodb_client = None
    logger.info("DynamoDB connection closed")


def get_dynamodb_client() -> Any:
    """
    Get the shared DynamoDB client

    Returns:
        botocore DynamoDB client

    Raises:
        RuntimeError: If DynamoDB has not been initialized
    """
    if _dynamodb_client is None:
        raise RuntimeError(
            "DynamoDB not initialized. Ensure init_dynamodb() has been called."
        )
    return _dynamodb_client
