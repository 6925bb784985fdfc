"""Standardized problem response schema."""

from pydantic import BaseModel, Field

PROBLEM_MEDIA_TYPE = "application/problem+json"


class Problem(BaseModel):
    """Error body returned on every failure path."""

    title: str = Field(..., description="Short, stable summary of the problem")
    status: int = Field(..., description="HTTP status code")
    detail: str | None = Field(None, description="Human-readable explanation specific to this occurrence")
