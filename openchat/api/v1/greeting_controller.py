# External package imports
from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter(tags=["greeting"])

GREETING = "Welcome to OPENCHAT!"


class GreetingResponse(BaseModel):
    message: str


@router.get("", response_model=GreetingResponse)
async def get_greeting() -> GreetingResponse:
    return GreetingResponse(message=GREETING)
