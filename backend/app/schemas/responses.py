"""
Common response schemas.
"""
from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    """Generic response with a message."""
    success: bool
    message: str
    data: Optional[dict] = None
