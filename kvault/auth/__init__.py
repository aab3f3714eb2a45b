"""Authentication module for kvault.

This module provides authentication functionality:
- Schema validation for auth operations
- Password hashing and verification (bcrypt)
- JWT token generation and validation
- Bearer token guard for protected endpoints

Auth endpoints (under the API prefix):
- POST /api/register - Create a user account
- POST /api/token - Exchange credentials for an access token
"""

from . import guard, schemas, service, token

__all__ = ["guard", "schemas", "service", "token"]
