# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.exceptions import MessageNotFoundError
from ...dto.message_dto import MessageResponse
from ._mapping import to_message_response


class GetMessageUseCase:
    """Use case for getting a message by ID"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(self, message_id: int) -> MessageResponse:
        """
        Get a message by ID

        Raises:
            MessageNotFoundError: If no message has this ID
        """
        message = await self.message_repository.find_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)

        return to_message_response(message)
