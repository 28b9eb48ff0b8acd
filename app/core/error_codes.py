"""
Stable machine-readable error codes returned in the `error_code` field
"""

# Request
INVALID_REQUEST = "INVALID_REQUEST"
INTERNAL_ERROR = "INTERNAL_ERROR"

# Authentication
NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
INVALID_TOKEN = "INVALID_TOKEN"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

# Users
USER_NOT_FOUND = "USER_NOT_FOUND"
USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

# Persistence
DATABASE_INTEGRITY_ERROR = "DATABASE_INTEGRITY_ERROR"
