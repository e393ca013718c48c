"""Domain layer: entities, errors and phone rules. No dependencies on outer layers."""

from contactbook.domain.entities import Contact
from contactbook.domain.errors import (
    ConflictError,
    ContactError,
    NotFoundError,
    ValidationError,
)
from contactbook.domain.phone import PHONE_LENGTH, is_valid_phone, normalize_phone

__all__ = [
    "PHONE_LENGTH",
    "ConflictError",
    "Contact",
    "ContactError",
    "NotFoundError",
    "ValidationError",
    "is_valid_phone",
    "normalize_phone",
]
