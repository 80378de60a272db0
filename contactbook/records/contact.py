# ==============================================
# Contact (Data Classes)
# ==============================================
#
# PURPOSE:
#   The value types every other topic passes around: the contact
#   record itself, the fields a store can be sorted by, and the
#   add/edit mode a form submission runs in.
#
# ENUMS:
# ------
# - SortField(Enum): NAME, PHONE
#     Which field RecordStore.sort_by() orders on.
#
# CLASSES:
# --------
# - Contact (frozen dataclass)
#     One address book entry.
#
#     Attributes:
#     -----------
#     - name: str     → at most 99 characters, required by validation
#     - phone: str    → at most 29 characters, may be empty
#     - email: str    → at most 99 characters, may be empty
#     - date: str     → at most 10 characters, free-form, may be empty
#
#     Longer values are truncated when the Contact is built.
#
# - EditMode (frozen dataclass)
#     Adding a new contact, or editing the contact at an index.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple


NAME_MAX_LENGTH = 99
PHONE_MAX_LENGTH = 29
EMAIL_MAX_LENGTH = 99
DATE_MAX_LENGTH = 10

FIELD_LIMITS = {
    "name": NAME_MAX_LENGTH,
    "phone": PHONE_MAX_LENGTH,
    "email": EMAIL_MAX_LENGTH,
    "date": DATE_MAX_LENGTH,
}


class SortField(Enum):
    """
    Fields the store can be ordered on.

    - NAME: case-insensitive order on contact name
    - PHONE: case-insensitive order on phone number
    """
    NAME = "name"
    PHONE = "phone"


@dataclass(frozen=True)
class Contact:
    """
    A single address book entry.

    Fields are plain text. None is stored as an empty string and every
    field is cut down to its maximum length on construction.
    """

    name: str
    phone: str = ""
    email: str = ""
    date: str = ""

    def __post_init__(self):
        for field_name, limit in FIELD_LIMITS.items():
            value = getattr(self, field_name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise TypeError(f"Contact.{field_name} must be str, got {type(value).__name__}")
            object.__setattr__(self, field_name, value[:limit])

    def fields(self) -> Tuple[str, str, str, str]:
        """Return the field values in file order: name, phone, email, date."""
        return (self.name, self.phone, self.email, self.date)


@dataclass(frozen=True)
class EditMode:
    """
    Whether a form submission adds a new contact or edits an existing one.

    Use EditMode.adding() or EditMode.editing_at(index) rather than
    constructing it directly.
    """

    index: Optional[int] = None

    @classmethod
    def adding(cls) -> "EditMode":
        return cls(index=None)

    @classmethod
    def editing_at(cls, index: int) -> "EditMode":
        if index is None:
            raise ValueError("editing_at() needs an index")
        return cls(index=index)

    @property
    def is_adding(self) -> bool:
        return self.index is None
