"""
Response Envelope

Every Todo endpoint wraps its payload as `{code, message, data}`.
"""

from typing import Any, Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform Response Envelope"""

    code: int = Field(..., description="Status Code")
    message: str = Field(..., description="Message")
    data: T = Field(..., description="Payload")

    @classmethod
    def success(cls, data: Any) -> "ApiResponse":
        return cls(code=200, message="success", data=data)

    @classmethod
    def failure(cls, code: int, message: str, data: Any = None) -> "ApiResponse":
        return cls(code=code, message=message, data=data)

    def to_response(self) -> JSONResponse:
        """Serialize the envelope, using `code` as the HTTP status."""
        return JSONResponse(content=self.model_dump(mode="json"), status_code=self.code)
