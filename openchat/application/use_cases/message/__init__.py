from .create_message import CreateMessageUseCase
from .list_messages import ListMessagesUseCase
from .get_message import GetMessageUseCase
from .update_message import UpdateMessageUseCase
from .delete_message import DeleteMessageUseCase

__all__ = [
    "CreateMessageUseCase",
    "ListMessagesUseCase",
    "GetMessageUseCase",
    "UpdateMessageUseCase",
    "DeleteMessageUseCase",
]
