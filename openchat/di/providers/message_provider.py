from typing import TYPE_CHECKING
from ...domain.repositories.message_repository import MessageRepository
from ...application.use_cases.message import (
    CreateMessageUseCase,
    ListMessagesUseCase,
    GetMessageUseCase,
    UpdateMessageUseCase,
    DeleteMessageUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MessageProvider:
    """Message use case provider - registers the message CRUD use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_class in (
            CreateMessageUseCase,
            ListMessagesUseCase,
            GetMessageUseCase,
            UpdateMessageUseCase,
            DeleteMessageUseCase,
        ):
            container.register_factory(
                use_case_class,
                # Bind the class now; the repository is resolved per call
                lambda cls=use_case_class: cls(
                    message_repository=container.get(MessageRepository)
                ),
            )
