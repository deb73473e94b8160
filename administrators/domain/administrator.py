"""
Administrator domain entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Administrator:
    """Administrator domain entity. Password material never leaves the store."""

    id: Optional[int]
    username: str
    created_at: datetime

    def __post_init__(self):
        """Validate administrator entity."""
        if not self.username or len(self.username.strip()) == 0:
            raise ValueError("Administrator username cannot be empty")
