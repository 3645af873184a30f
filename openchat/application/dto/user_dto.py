from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password material)"""
    id: int
    username: str
