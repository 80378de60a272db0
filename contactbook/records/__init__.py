# ==============================================
# TOPIC 1: RECORDS
# ==============================================
#
# The contact record type plus the small enums and modes that
# travel with it.
#
# Modules:
# --------
# - contact.py  → Contact, SortField, EditMode, field length limits
#
# ==============================================

from .contact import Contact, SortField, EditMode, FIELD_LIMITS

__all__ = ["Contact", "SortField", "EditMode", "FIELD_LIMITS"]
