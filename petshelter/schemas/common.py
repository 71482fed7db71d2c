"""Common Pydantic schemas."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

OrderDirection = Literal["asc", "desc"]


class BaseResponse(BaseModel):
    """Base response model."""

    model_config = {"extra": "allow"}

    success: bool = True
    message: str | None = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class ErrorResponse(BaseResponse):
    """Error response model."""

    success: bool = False
    error_code: str | None = None
    details: dict[str, Any] | None = None


class ListQuery(BaseModel):
    """Pagination, ordering and free-text search shared by list endpoints."""

    page: int = Field(default=1, ge=1, description="Page number")
    page_size: int = Field(default=10, ge=1, le=100, description="Items per page")
    order_by: str | None = Field(default=None, description="Field to sort by")
    order_direction: OrderDirection = Field(default="desc", description="Sort order")
    search: str | None = Field(default=None, max_length=100, description="Search query")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PaginationMeta(BaseModel):
    """Pagination metadata."""

    page: int = Field(ge=1, description="Current page number")
    page_size: int = Field(ge=1, le=100, description="Items per page")
    count: int = Field(ge=0, description="Number of items in this page")
