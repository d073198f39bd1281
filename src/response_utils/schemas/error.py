"""Error response schemas.

All error responses use the same envelope:
{"success": false, "error": {"code": "...", "message": "...", "details": {...}}}.
The emitters build the inner object inline (``details`` always present);
these models document the shape for OpenAPI ``responses=``.
"""

from typing import Any

from pydantic import Field

from response_utils.schemas.envelope import Envelope


class ErrorDetail(Envelope):
    """Inner error object with a machine-readable code and human-readable message."""

    omit_if_none = ("details",)

    code: str = Field(examples=["NOT_FOUND"])
    message: str = Field(examples=["User not found"])
    details: Any | None = None


class ErrorResponseDTO(Envelope):
    """Top-level error envelope returned by all error responses."""

    success: bool = Field(default=False, examples=[False])
    error: ErrorDetail
