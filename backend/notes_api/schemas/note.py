"""
Notes API Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the JSON contract of the API.
Why:   Automatic serialization and OpenAPI doc generation.
How:   Routes wrap domain Notes in these models; FastAPI serializes them by
       alias, so JSON keys are camelCase (createdAt, updatedAt).

Design Decision:
    Request bodies are NOT parsed through Pydantic models. The notes service
    validates raw payloads so that a wrong type is a 400 business-rule error
    with a readable message rather than a 422 schema error. The request
    models below only describe the bodies in the OpenAPI document.
"""

from datetime import datetime
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notes_api.models.note import Note

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for models exposed with camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(CamelModel):
    """Full representation of a note."""

    id: str = Field(description="Note identifier, assigned by the server")
    title: str = Field(description="Trimmed, non-empty title")
    content: str = Field(default="", description="Note body; may be empty")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last changed (UTC ISO 8601)")

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls.model_validate(note)


class DataResponse(BaseModel, Generic[T]):
    """Success envelope: every 2xx body is `{"data": ...}`."""

    data: T


class ErrorResponse(BaseModel):
    """
    Error envelope returned for every 4xx/5xx.

    Example:
        {"error": "Note not found"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(CamelModel):
    """Liveness payload returned by GET / and GET /health."""

    status: str = Field(description="Always 'ok' while the process serves requests")
    message: str = Field(description="Human-readable status")
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    environment: str = Field(description="Deployment environment name")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — Documentation only (see module docstring)
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateBody(BaseModel):
    title: str = Field(description="Required; must be non-empty after trimming")
    content: Optional[str] = Field(default=None, description="Optional; defaults to empty")


class NoteUpdateBody(BaseModel):
    """At least one of title/content must be provided."""

    title: Optional[str] = Field(default=None, description="If provided, must be non-empty after trimming")
    content: Optional[str] = Field(default=None, description="If provided, replaces the content (may be empty)")


def request_body_doc(model: Type[BaseModel], required: bool = True) -> Dict[str, Any]:
    """`openapi_extra` that documents a JSON request body with the given model."""
    return {
        "requestBody": {
            "required": required,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
