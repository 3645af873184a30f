# Standard library imports
import logging

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.exceptions import MessageNotFoundError
from ...dto.message_dto import MessageDeleteResponse

logger = logging.getLogger(__name__)


class DeleteMessageUseCase:
    """Use case for deleting a message by ID"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(self, message_id: int) -> MessageDeleteResponse:
        """
        Delete a message

        Raises:
            MessageNotFoundError: If no message has this ID (nothing is removed)
        """
        deleted = await self.message_repository.delete(message_id)
        if not deleted:
            raise MessageNotFoundError(message_id)

        logger.info(f"Deleted message {message_id}")
        return MessageDeleteResponse()
