# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ...dto.message_dto import MessageResponse
from ._mapping import to_message_response


class ListMessagesUseCase:
    """Use case for listing every message, most recent first"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(self) -> List[MessageResponse]:
        messages = await self.message_repository.find_all()
        return [to_message_response(message) for message in messages]
