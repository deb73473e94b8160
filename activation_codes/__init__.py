"""
Activation codes module - Activation code and account management.

This module handles:
- ActivationCode and Account entities
- Validity evaluation (disabled, expired)
- Quota-checked account registration
- Code redemption for app tokens
"""
