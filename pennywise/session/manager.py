"""Mini README: Mock account session for the profile screens.

Structure:
    * AuthenticationError - raised for rejected credentials or missing login.
    * SessionManager - owns the signed-in profile and persists it.
    * CATEGORY_BUDGET_NAMES - categories offered on the budget limits screen.

Login and registration imitate a remote call by sleeping on the event loop
before answering. Callers await them directly or wrap them in a task and
cancel it; a cancelled call leaves the session exactly as it was. The
manager is an ordinary object handed to the interface, not a module global.
"""

from __future__ import annotations

import asyncio
import json
import math
from typing import Dict, Mapping, Optional

from ..logging_utils import get_logger
from .profile import UserProfile, find_currency
from .storage import KeyValueStore

LOGGER = get_logger(__name__)

CURRENT_USER_KEY = "currentUser"
CATEGORY_BUDGETS_KEY = "categoryBudgets"

DEMO_EMAIL = "john@example.com"
DEMO_PASSWORD = "password"

CATEGORY_BUDGET_NAMES = (
    "Shopping",
    "Housing",
    "Transport",
    "Food",
    "Entertainment",
    "Health",
    "Subscriptions",
    "Utilities",
)


class AuthenticationError(Exception):
    """Raised when a session operation is refused."""


def _demo_profile() -> UserProfile:
    return UserProfile(
        email=DEMO_EMAIL,
        first_name="John",
        last_name="Doe",
        currency="USD",
        monthly_budget=3000.0,
    )


class SessionManager:
    """Track the signed-in user and mirror it into local storage."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        login_delay: float = 1.5,
        register_delay: float = 2.0,
    ) -> None:
        self._store = store
        self.login_delay = login_delay
        self.register_delay = register_delay
        self.current_user: Optional[UserProfile] = None
        self.is_loading = False
        self._restore_existing_user()

    @property
    def is_logged_in(self) -> bool:
        return self.current_user is not None

    def _restore_existing_user(self) -> None:
        payload = self._store.get(CURRENT_USER_KEY)
        if payload is None:
            return
        try:
            self.current_user = UserProfile.from_json(payload)
        except ValueError as error:
            LOGGER.warning("Ignoring stored session: %s", error)
            return
        LOGGER.debug("Restored session for %s", self.current_user.email)

    def _persist(self, profile: UserProfile) -> None:
        self.current_user = profile
        self._store.set(CURRENT_USER_KEY, profile.to_json())

    def _require_user(self) -> UserProfile:
        if self.current_user is None:
            raise AuthenticationError("Sign in to change account settings.")
        return self.current_user

    async def _simulate_call(self, delay: float) -> None:
        self.is_loading = True
        try:
            await asyncio.sleep(delay)
        finally:
            self.is_loading = False

    async def login(self, email: str, password: str) -> UserProfile:
        """Sign in with the demo credentials after a simulated delay."""

        await self._simulate_call(self.login_delay)
        if email != DEMO_EMAIL or password != DEMO_PASSWORD:
            LOGGER.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")
        profile = _demo_profile()
        self._persist(profile)
        LOGGER.info("Signed in %s", profile.email)
        return profile

    async def register(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> UserProfile:
        """Create and sign in a new local profile after a simulated delay."""

        fields = {
            "first name": first_name,
            "last name": last_name,
            "email": email,
            "password": password,
        }
        missing = [label for label, value in fields.items() if not value.strip()]
        if missing:
            raise AuthenticationError(f"Missing {', '.join(missing)}")
        await self._simulate_call(self.register_delay)
        profile = UserProfile(
            email=email.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            currency="USD",
            monthly_budget=0.0,
        )
        self._persist(profile)
        LOGGER.info("Registered %s", profile.email)
        return profile

    def update_profile(self, profile: UserProfile) -> None:
        """Replace the stored profile."""

        self._persist(profile)
        LOGGER.info("Updated profile for %s", profile.email)

    def edit_profile(self, first_name: str, last_name: str, email: str) -> UserProfile:
        user = self._require_user()
        if not first_name.strip() or not last_name.strip() or not email.strip():
            raise ValueError("First name, last name and email are required.")
        user.first_name = first_name.strip()
        user.last_name = last_name.strip()
        user.email = email.strip()
        self.update_profile(user)
        return user

    def set_currency(self, code: str) -> UserProfile:
        """Switch the display currency; raises ``KeyError`` for unknown codes."""

        user = self._require_user()
        user.currency = find_currency(code).code
        self.update_profile(user)
        return user

    def set_monthly_budget(self, amount: float) -> UserProfile:
        user = self._require_user()
        if not math.isfinite(amount) or amount < 0:
            raise ValueError("Monthly budget must be a non-negative number.")
        user.monthly_budget = float(amount)
        self.update_profile(user)
        return user

    def set_notifications(self, enabled: bool) -> UserProfile:
        user = self._require_user()
        user.notifications_enabled = enabled
        self.update_profile(user)
        return user

    def logout(self) -> None:
        if self.current_user is not None:
            LOGGER.info("Signed out %s", self.current_user.email)
        self.current_user = None
        self._store.delete(CURRENT_USER_KEY)

    def category_budgets(self) -> Dict[str, float]:
        """Return saved per-category limits, zero for anything unset."""

        budgets = {name: 0.0 for name in CATEGORY_BUDGET_NAMES}
        payload = self._store.get(CATEGORY_BUDGETS_KEY)
        if payload is None:
            return budgets
        try:
            stored = json.loads(payload)
        except json.JSONDecodeError as error:
            LOGGER.warning("Ignoring unreadable category budgets: %s", error)
            return budgets
        if not isinstance(stored, dict):
            LOGGER.warning("Ignoring category budgets: expected a JSON object")
            return budgets
        for name, value in stored.items():
            if name in budgets and isinstance(value, (int, float)):
                budgets[name] = float(value)
        return budgets

    def save_category_budgets(self, budgets: Mapping[str, float]) -> Dict[str, float]:
        """Validate and store per-category limits. Limits are not enforced."""

        merged = self.category_budgets()
        for name, value in budgets.items():
            if name not in merged:
                raise KeyError(f"Unknown budget category '{name}'")
            amount = float(value)
            if not math.isfinite(amount) or amount < 0:
                raise ValueError(f"Budget for {name} must not be negative.")
            merged[name] = amount
        self._store.set(CATEGORY_BUDGETS_KEY, json.dumps(merged))
        LOGGER.info("Saved category budgets for %s categories", len(budgets))
        return merged
