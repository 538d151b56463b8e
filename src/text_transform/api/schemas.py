"""
API Schemas

Pydantic models for the REST API request body and response envelope.

Every response, success or failure, uses one envelope:

    {"success": bool, "data": ..., "error": {...} | null, "meta": {"timestamp", "version"}}
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from text_transform import __version__


# =============================================================================
# Envelope
# =============================================================================

def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ApiMeta(BaseModel):
    """Response metadata."""
    timestamp: str = Field(default_factory=utc_timestamp)
    version: str = __version__


class ApiError(BaseModel):
    """Error payload."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ApiResponse(BaseModel):
    """Response envelope."""
    success: bool
    data: Optional[Any] = None
    error: Optional[ApiError] = None
    meta: ApiMeta = Field(default_factory=ApiMeta)

    @classmethod
    def ok(cls, data: Any) -> "ApiResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> "ApiResponse":
        return cls(success=False, error=ApiError(code=code, message=message, details=details))


# =============================================================================
# Requests
# =============================================================================

class TransformRequest(BaseModel):
    """POST /api/transform/{category}/{tool} body."""
    input: Optional[str] = Field(default=None, description="Input text; optional for generators")
    options: Dict[str, Any] = Field(default_factory=dict, description="Tool options by key")
