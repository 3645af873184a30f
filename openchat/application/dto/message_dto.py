# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, Field


class MessageCreateRequest(BaseModel):
    """DTO for message creation request"""
    sender: str = Field(min_length=1, max_length=100)
    content: str
    timestamp: Optional[datetime] = None  # defaults to now (UTC)


class MessageUpdateRequest(BaseModel):
    """DTO for message update request; content None is rejected by the use case"""
    content: Optional[str] = None


class MessageResponse(BaseModel):
    """DTO for message response"""
    id: int
    sender: str
    content: str
    timestamp: datetime


class MessageDeleteResponse(BaseModel):
    """DTO confirming a deletion"""
    success: bool = True
    message: str = "Message deleted"
