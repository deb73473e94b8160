"""
Administrators module - Administrator accounts and login.

This module handles:
- Administrator entity
- Password verification
- Admin token issuance on login
"""
