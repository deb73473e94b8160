"""
RegisterAccountCommand.

Command to register an account under an activation code.
"""

from dataclasses import dataclass, field


@dataclass
class RegisterAccountCommand:
    """Command to register an account."""

    code_id: int
    email: str
    email_password: str = field(repr=False)
    service_password: str = field(repr=False)
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
