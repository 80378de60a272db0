# ==============================================
# PERSISTENCE (Contacts across restarts)
# ==============================================
#
# This package saves the address book to a single encoded file and
# loads it back, so contacts survive process restarts.
#
# Modules:
# --------
# - contact_file.py  → PersistenceService, LoadResult, LoadOutcome
#
# ==============================================

from .contact_file import PersistenceService, LoadResult, LoadOutcome

__all__ = ["PersistenceService", "LoadResult", "LoadOutcome"]
