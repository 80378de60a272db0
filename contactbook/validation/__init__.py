# ==============================================
# TOPIC 2: VALIDATION
# ==============================================
#
# Pure predicates for each contact field. Consulted by the record
# store before any mutation and by form collaborators before they
# submit anything.
#
# Modules:
# --------
# - validators.py → validate_name / validate_phone / validate_email,
#                   trim_field, validate_contact
#
# ==============================================

from .validators import (
    validate_name,
    validate_phone,
    validate_email,
    contains_delimiter,
    trim_field,
    validate_contact,
)

__all__ = [
    "validate_name",
    "validate_phone",
    "validate_email",
    "contains_delimiter",
    "trim_field",
    "validate_contact",
]
