"""
RedeemActivationCodeCommand.

Command to exchange an activation code for an app token.
"""

from dataclasses import dataclass


@dataclass
class RedeemActivationCodeCommand:
    """Command to redeem an activation code."""

    code: str
