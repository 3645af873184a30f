from ....domain.models.message import Message
from ...dto.message_dto import MessageResponse


def to_message_response(message: Message) -> MessageResponse:
    """Convert a stored Message domain model to its response DTO"""
    return MessageResponse(
        id=message.id,
        sender=message.sender,
        content=message.content,
        timestamp=message.timestamp,
    )
