"""
Administrator DTOs for API responses.
"""
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class LoginResponseDTO:
    """DTO for login response."""

    token: str = field(repr=False)
    expires_at: datetime
    expires_in: int
