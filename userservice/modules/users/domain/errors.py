"""
User Errors

Fixed error definitions for user validation and uniqueness rules.
"""
from userservice.core.errors import ErrorType, define


class UserErrors:
    """Errors specific to the User entity."""
    MISSING_EMAIL = define("User.MissingEmail", "Email is required.", ErrorType.VALIDATION)
    EMAIL_TOO_LONG = define(
        "User.EmailTooLong", "Email exceeds the maximum allowed length.", ErrorType.VALIDATION
    )
    MISSING_FULL_NAME = define("User.MissingFullName", "Full name is required.", ErrorType.VALIDATION)
    FULL_NAME_TOO_LONG = define(
        "User.FullNameTooLong", "Full name exceeds the maximum allowed length.", ErrorType.VALIDATION
    )
    EMAIL_CONFLICT = define("User.EmailConflict", "Email is already registered.", ErrorType.CONFLICT)
