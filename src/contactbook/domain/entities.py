"""Domain entity: Contact."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact book: display name plus normalized phone.
    The id is assigned once at creation and never changes; updates produce a new Contact.
    """

    name: str
    phone: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        if not self.phone:
            raise ValueError("Contact phone must be non-empty.")

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "phone": self.phone}
