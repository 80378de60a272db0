# ==============================================
# Error Kinds
# ==============================================
#
# Every error here is recoverable at the call site. Components raise
# them before mutating anything, so a caught error means the store
# is exactly as it was.
#
# - ContactBookError      → base class
# - ValidationFailed      → a field broke a validation rule
# - CapacityExceeded      → add rejected, store is full
# - IndexOutOfRange       → update/delete outside [0, length)
# - PersistenceError      → file could not be opened/read/written
# - SerializationError    → store cannot be written in the text format
#
# "Nothing to load" and "no valid records" are outcomes, not errors.
# See persistence.contact_file.LoadOutcome.
#
# ==============================================


class ContactBookError(Exception):
    """Base class for all contact book errors."""


class ValidationFailed(ContactBookError):
    """A contact field failed validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")


class CapacityExceeded(ContactBookError):
    """The store already holds its maximum number of contacts."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Contact list is full ({capacity} contacts)")


class IndexOutOfRange(ContactBookError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"No contact at index {index} (store holds {length})")


class PersistenceError(ContactBookError):
    """Reading or writing the contact file failed."""


class SerializationError(PersistenceError):
    """The contacts cannot be represented within the file format limits."""
