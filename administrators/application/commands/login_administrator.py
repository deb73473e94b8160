"""
LoginAdministratorCommand.

Command to log an administrator in.
"""

from dataclasses import dataclass, field


@dataclass
class LoginAdministratorCommand:
    """Command to exchange administrator credentials for a token."""

    username: str
    password: str = field(repr=False)
