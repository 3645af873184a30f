# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.exceptions import MessageNotFoundError, NullContentError
from ...dto.message_dto import MessageUpdateRequest, MessageResponse
from ._mapping import to_message_response

logger = logging.getLogger(__name__)


class UpdateMessageUseCase:
    """Use case for replacing the content of an existing message"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(
        self,
        message_id: int,
        request: Optional[MessageUpdateRequest],
    ) -> MessageResponse:
        """
        Update a message's content

        Content is validated before the lookup, so a null update of a missing
        message reports NullContentError.

        Args:
            message_id: ID of the message
            request: Update request carrying the new content

        Returns:
            MessageResponse with the updated message

        Raises:
            NullContentError: If the new content is missing
            MessageNotFoundError: If no message has this ID
        """
        if request is None or request.content is None:
            raise NullContentError()

        message = await self.message_repository.find_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)

        message.content = request.content
        updated_message = await self.message_repository.save(message)
        logger.info(f"Updated content of message {updated_message.id}")

        return to_message_response(updated_message)
