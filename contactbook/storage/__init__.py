# ==============================================
# TOPIC 3: STORAGE
# ==============================================
#
# The in-memory address book: a bounded, ordered list of contacts
# with add/update/delete, filtering and sorting.
#
# Modules:
# --------
# - record_store.py   → RecordStore
#
# ==============================================

from .record_store import RecordStore, DEFAULT_CAPACITY, sort_key

__all__ = ["RecordStore", "DEFAULT_CAPACITY", "sort_key"]
