# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.models.message import Message
from ....domain.exceptions import NullMessageError
from ....utils.datetime_utils import ensure_utc, utc_now
from ...dto.message_dto import MessageCreateRequest, MessageResponse
from ._mapping import to_message_response

logger = logging.getLogger(__name__)


class CreateMessageUseCase:
    """Use case for creating a new message"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(self, request: Optional[MessageCreateRequest]) -> MessageResponse:
        """
        Create a new message

        Args:
            request: Message creation request; the timestamp defaults to now

        Returns:
            MessageResponse with the stored message (ID assigned)

        Raises:
            NullMessageError: If no request was supplied
        """
        if request is None:
            raise NullMessageError()

        new_message = Message(
            id=None,  # Will be set by repository
            sender=request.sender,
            content=request.content,
            timestamp=ensure_utc(request.timestamp) or utc_now(),
        )

        saved_message = await self.message_repository.save(new_message)
        logger.info(f"Created message {saved_message.id} from {saved_message.sender}")

        return to_message_response(saved_message)
