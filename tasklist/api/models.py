"""
API Models (Pydantic)

Request/Response schemas for the API.
"""

from typing import Optional

from pydantic import BaseModel


class TaskRequest(BaseModel):
    """Body of POST/PUT/PATCH /tasks. A client-sent id is accepted and ignored."""
    id: Optional[int] = None
    title: str

    model_config = {
        "json_schema_extra": {
            "example": {"title": "Buy milk"}
        }
    }


class TaskResponse(BaseModel):
    """Serialized task; field order is part of the wire format."""
    id: int
    title: str


class ErrorResponse(BaseModel):
    message: str
