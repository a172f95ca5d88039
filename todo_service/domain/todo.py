"""
Todo Domain Model

Defines the Todo entity and its request Data Transfer Objects (DTOs).
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_serializer, field_validator

from todo_service.common.time import truncate_to_millis


class Todo(BaseModel):
    """
    Todo Complete Model

    `id` stays empty until `generate_id()` is called; once assigned it never changes.
    """

    id: str = Field("", description="Todo ID (UUID)")
    title: str = Field(..., description="Title")
    description: str = Field(..., description="Description")
    created: datetime = Field(..., description="Creation Time (UTC, millisecond precision)")

    @field_validator("created")
    @classmethod
    def normalize_created(cls, v: datetime) -> datetime:
        return truncate_to_millis(v)

    @field_serializer("created")
    def serialize_created(self, v: datetime) -> str:
        return v.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def __setattr__(self, name: str, value) -> None:
        if name == "id" and self.id and value != self.id:
            raise ValueError(f"Todo id is immutable once assigned: {self.id}")
        super().__setattr__(name, value)

    @classmethod
    def new(cls, title: str, description: str, created: datetime) -> "Todo":
        """Build a Todo that has no identifier yet."""
        return cls(title=title, description=description, created=created)

    def generate_id(self) -> str:
        """
        Assign a fresh random identifier

        Returns:
            str: The new identifier

        Raises:
            ValueError: The Todo already has an identifier
        """
        if self.id:
            raise ValueError(f"Todo already has an id: {self.id}")
        self.id = str(uuid.uuid4())
        return self.id


class TodoCreate(BaseModel):
    """Create Todo Request Model"""

    title: str = Field(..., description="Title")
    description: str = Field(..., description="Description")


class TodoUpdate(BaseModel):
    """Update Todo Request Model"""

    id: str = Field(..., min_length=1, description="Todo ID")
    title: str = Field(..., description="Title")
    description: str = Field(..., description="Description")
