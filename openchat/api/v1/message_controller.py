# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Body, status

# Local application imports
from ...application.dto.message_dto import (
    MessageCreateRequest,
    MessageUpdateRequest,
    MessageResponse,
    MessageDeleteResponse,
)
from ...application.use_cases.message import (
    CreateMessageUseCase,
    ListMessagesUseCase,
    GetMessageUseCase,
    UpdateMessageUseCase,
    DeleteMessageUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["messages"])


@router.get("", response_model=List[MessageResponse])
async def list_messages() -> List[MessageResponse]:
    """
    List all messages, most recent first
    """
    container = get_container()
    list_messages_use_case = container.get(ListMessagesUseCase)

    return await list_messages_use_case.execute()


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: int) -> MessageResponse:
    """
    Get a message by ID

    Args:
        message_id: ID of the message
    """
    container = get_container()
    get_message_use_case = container.get(GetMessageUseCase)

    return await get_message_use_case.execute(message_id)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    request: Optional[MessageCreateRequest] = Body(default=None),
) -> MessageResponse:
    """
    Create a new message

    An empty body is answered with 400 rather than a validation error.
    """
    container = get_container()
    create_message_use_case = container.get(CreateMessageUseCase)

    return await create_message_use_case.execute(request)


@router.put("/{message_id}", response_model=MessageResponse)
async def update_message(
    message_id: int,
    request: Optional[MessageUpdateRequest] = Body(default=None),
) -> MessageResponse:
    """
    Replace the content of a message

    Args:
        message_id: ID of the message
        request: Update request with the new content
    """
    container = get_container()
    update_message_use_case = container.get(UpdateMessageUseCase)

    return await update_message_use_case.execute(message_id, request)


@router.delete("/{message_id}", response_model=MessageDeleteResponse)
async def delete_message(message_id: int) -> MessageDeleteResponse:
    """
    Delete a message by ID
    """
    container = get_container()
    delete_message_use_case = container.get(DeleteMessageUseCase)

    return await delete_message_use_case.execute(message_id)
