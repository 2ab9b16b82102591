"""
food_ordering.errors
Typed failures raised by the domain services. The API layer maps them to
HTTP status codes in food_ordering.exceptions.
"""
from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ----- 400 ------------------------------------------------------------------

class ValidationError(DomainError):
    status_code = 400
    default_message = "Invalid input"


class EmptyCart(ValidationError):
    default_message = "Cart is empty"


class ConflictError(DomainError):
    # Duplicate resources answer 400, not 409, to keep the client contract.
    status_code = 400
    default_message = "Conflict"


class DuplicateEmail(ConflictError):
    default_message = "User already exists"


# ----- 401 ------------------------------------------------------------------

class AuthError(DomainError):
    status_code = 401
    default_message = "Unauthorized"


class MissingToken(AuthError):
    default_message = "Unauthorized"


class InvalidToken(AuthError):
    default_message = "Invalid token"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


# ----- 404 ------------------------------------------------------------------

class NotFoundError(DomainError):
    status_code = 404
    default_message = "Not found"


class ItemNotFound(NotFoundError):
    default_message = "Menu item not found or unavailable"


# ----- 500 ------------------------------------------------------------------

class InternalError(DomainError):
    status_code = 500
    default_message = "Internal server error"
