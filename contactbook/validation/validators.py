import re
from typing import Optional

from contactbook.errors import ValidationFailed
from contactbook.records.contact import Contact


PHONE_ALLOWED_CHARS = frozenset("0123456789+-")
PHONE_COUNTRY_PREFIXES = ("+44", "+60")

# Characters the text format uses as record/line boundaries
DELIMITER_PATTERN = re.compile(r"[|\r\n]")


def validate_name(name: str) -> bool:
    return len(name) > 0


def validate_phone(phone: str) -> bool:
    """
    Digits, '+' and '-' only. A leading '+' must start one of the
    whitelisted country prefixes. The empty string is valid.
    """
    for ch in phone:
        if ch not in PHONE_ALLOWED_CHARS:
            return False

    if phone.startswith("+"):
        return phone.startswith(PHONE_COUNTRY_PREFIXES)

    return True


def validate_email(email: str) -> bool:
    if not email:
        return True
    return "@" in email


def contains_delimiter(value: str) -> bool:
    return DELIMITER_PATTERN.search(value) is not None


def trim_field(value: Optional[str]) -> str:
    """
    Strip trailing whitespace and control characters from a form field.
    Leading whitespace is kept.
    """
    if value is None:
        return ""
    return value.rstrip()


def validate_contact(contact: Contact) -> None:
    """
    Check every field of a contact, in form order.

    Args:
        contact: Contact to check

    Raises:
        ValidationFailed: for the first field that breaks a rule
    """
    if not validate_name(contact.name):
        raise ValidationFailed("name", "Must not be empty.")

    if not validate_phone(contact.phone):
        if contact.phone.startswith("+") and all(ch in PHONE_ALLOWED_CHARS for ch in contact.phone):
            raise ValidationFailed(
                "phone",
                f"Country code must be one of {', '.join(PHONE_COUNTRY_PREFIXES)}."
            )
        raise ValidationFailed("phone", "Digits, '+' and '-' only.")

    if not validate_email(contact.email):
        raise ValidationFailed("email", "Must contain '@'.")

    for field_name, value in zip(("name", "phone", "email", "date"), contact.fields()):
        if contains_delimiter(value):
            raise ValidationFailed(field_name, "Must not contain '|' or line breaks.")
