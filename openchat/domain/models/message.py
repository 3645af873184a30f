# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Message:
    """
    Pure domain model for Message entity - no external dependencies.

    Only ``content`` changes after creation; ``id``, ``sender`` and
    ``timestamp`` are fixed for the lifetime of the record.
    """
    id: Optional[int]
    sender: str
    content: str
    timestamp: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.sender or len(self.sender.strip()) < 1:
            raise ValueError("Sender is required")
        if self.content is None:
            raise ValueError("Content is required")
