from pydantic import BaseModel, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=256)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=256)


class AuthResponse(BaseModel):
    """DTO returned by register and login"""
    username: str
    token: str
    token_type: str = "bearer"
