"""Success and list response envelopes.

Success: {"success": true, "data": ..., "message": "..."}  (data/message omitted if empty)
List:    {"success": true, "data": [...], "pagination": {...}}  (pagination omitted if null)
"""

from typing import Any

from pydantic import Field

from response_utils.schemas.envelope import Envelope
from response_utils.schemas.pagination import Pagination


class Response(Envelope):
    """Generic envelope written by the emitters.

    ``data`` and ``error`` are never both set by this package, but the model
    does not enforce it.
    """

    omit_if_none = ("data", "error", "message")

    success: bool = Field(examples=[True])
    data: Any | None = None
    error: Any | None = None
    message: str | None = Field(default=None, examples=["Operation completed successfully"])


class SuccessResponseDTO(Envelope):
    """Successful API response structure (for ``response_model`` / OpenAPI)."""

    omit_if_none = ("data", "message")

    success: bool = Field(default=True, examples=[True])
    data: Any | None = None
    message: str | None = Field(default=None, examples=["Operation completed successfully"])


class CreatedResponseDTO(Envelope):
    """201 Created response structure; ``message`` is always present."""

    omit_if_none = ("data",)

    success: bool = Field(default=True, examples=[True])
    data: Any | None = None
    message: str = Field(examples=["Resource created successfully"])


class ListResponse(Envelope):
    """Paginated list envelope. ``data`` is always serialized, even when null."""

    omit_if_none = ("pagination",)

    success: bool
    data: Any
    pagination: Pagination | None = None
