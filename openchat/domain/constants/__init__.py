"""Constants for domain model field names"""

from .user_fields import UserFields
from .message_fields import MessageFields
from .counter_fields import CounterFields

__all__ = [
    "UserFields",
    "MessageFields",
    "CounterFields",
]
