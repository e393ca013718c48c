"""Contact list, create, update and delete over a single repository."""

import logging
import threading
from dataclasses import replace

from contactbook.application.dto import ContactChanges, NewContact
from contactbook.application.ports import ContactRepository
from contactbook.domain import (
    ConflictError,
    Contact,
    NotFoundError,
    ValidationError,
    is_valid_phone,
    normalize_phone,
)
from contactbook.domain.errors import MISSING_FIELDS_MESSAGE

logger = logging.getLogger(__name__)


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


class ContactService:
    """Use cases over the contact registry. Each call runs under one lock, so the
    uniqueness check and the write that follows it cannot interleave with another request."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository
        self._lock = threading.Lock()

    def _checked_phone(self, raw: str, *, owner_id: str | None = None) -> str:
        """Normalize and validate a phone. owner_id is the contact allowed to already hold it."""
        phone = normalize_phone(raw)
        if not is_valid_phone(phone):
            raise ValidationError()
        holder = self._repo.find_by_phone(phone)
        if holder is not None and holder.id != owner_id:
            raise ConflictError()
        return phone

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in creation order."""
        with self._lock:
            return self._repo.list_all()

    def create_contact(self, data: NewContact) -> Contact:
        """Validate, normalize the phone and store a new contact. Returns the stored record."""
        # A whitespace-only phone is present but invalid, not missing.
        if not _has_text(data.name) or not data.phone:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        with self._lock:
            phone = self._checked_phone(data.phone)
            contact = Contact(name=data.name, phone=phone)
            self._repo.add(contact)
        logger.info("Contact created: %s", contact.id)
        return contact

    def update_contact(self, contact_id: str, changes: ContactChanges) -> Contact:
        """Replace name and/or phone of an existing contact.

        Both fields are checked before anything is written, so a rejected phone
        leaves the name untouched too. An empty change set returns the contact as is.
        """
        name = changes.name if _has_text(changes.name) else None
        raw_phone = changes.phone or None

        with self._lock:
            current = self._repo.get_by_id(contact_id)
            if current is None:
                raise NotFoundError(contact_id)

            updated = current
            if raw_phone:
                updated = replace(updated, phone=self._checked_phone(raw_phone, owner_id=current.id))
            if name:
                updated = replace(updated, name=name)
            if updated is current:
                return current
            self._repo.replace(updated)
        logger.info("Contact updated: %s", contact_id)
        return updated

    def delete_contact(self, contact_id: str) -> list[Contact]:
        """Remove one contact and return the contacts that remain, in order."""
        with self._lock:
            if not self._repo.remove(contact_id):
                raise NotFoundError(contact_id)
            remaining = self._repo.list_all()
        logger.info("Contact deleted: %s", contact_id)
        return remaining
