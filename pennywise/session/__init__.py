"""Mini README: Account session and local preference storage.

Holds the mock sign-in flow, the user profile it produces and the small
key-value store the profile is mirrored into. None of this feeds the
ledger; screens read it to label amounts and show account details.
"""

from .manager import AuthenticationError, CATEGORY_BUDGET_NAMES, SessionManager
from .profile import CURRENCIES, Currency, UserProfile, find_currency
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "AuthenticationError",
    "CATEGORY_BUDGET_NAMES",
    "CURRENCIES",
    "Currency",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "SessionManager",
    "UserProfile",
    "find_currency",
]
