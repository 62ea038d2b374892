"""Mini README: Tests for the mock session, profile model and local storage.

These tests drive the async sign-in flow with ``asyncio.run`` and zero
delays, confirm profiles survive a restart through the key-value store,
and check that a cancelled login leaves no trace.
"""

from __future__ import annotations

import asyncio
import json

import pytest

from pennywise.session import (
    AuthenticationError,
    JsonFileStore,
    MemoryStore,
    SessionManager,
    UserProfile,
)


def _manager(store=None, **delays) -> SessionManager:
    delays.setdefault("login_delay", 0)
    delays.setdefault("register_delay", 0)
    return SessionManager(store if store is not None else MemoryStore(), **delays)


def test_login_with_demo_credentials_persists_profile() -> None:
    store = MemoryStore()
    manager = _manager(store)

    profile = asyncio.run(manager.login("john@example.com", "password"))

    assert manager.is_logged_in
    assert profile.full_name == "John Doe"
    assert profile.monthly_budget == pytest.approx(3000.0)
    stored = json.loads(store.get("currentUser"))
    assert stored["firstName"] == "John"
    assert stored["notificationsEnabled"] is True

    restored = _manager(store)
    assert restored.current_user is not None
    assert restored.current_user.id == profile.id


def test_login_rejects_wrong_password() -> None:
    manager = _manager()

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        asyncio.run(manager.login("john@example.com", "hunter2"))
    assert not manager.is_logged_in
    assert manager.is_loading is False


def test_cancelled_login_changes_nothing() -> None:
    manager = _manager(login_delay=30)

    async def scenario() -> None:
        task = asyncio.create_task(manager.login("john@example.com", "password"))
        await asyncio.sleep(0)
        assert manager.is_loading is True
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert manager.is_loading is False
    assert manager.current_user is None


def test_register_creates_fresh_profile() -> None:
    manager = _manager()

    profile = asyncio.run(manager.register("Ada", "Lovelace", "ada@example.com", "secret"))

    assert profile.currency == "USD"
    assert profile.monthly_budget == 0.0
    assert manager.current_user is profile


def test_register_requires_every_field() -> None:
    manager = _manager()

    with pytest.raises(AuthenticationError, match="last name"):
        asyncio.run(manager.register("Ada", " ", "ada@example.com", "secret"))


def test_profile_edits_require_login() -> None:
    manager = _manager()

    with pytest.raises(AuthenticationError):
        manager.set_currency("EUR")


def test_profile_edits_are_validated_and_saved() -> None:
    store = MemoryStore()
    manager = _manager(store)
    asyncio.run(manager.login("john@example.com", "password"))

    manager.set_currency("kzt")
    manager.set_monthly_budget(1250.5)
    manager.set_notifications(False)
    manager.edit_profile("Johnny", "Doe", "johnny@example.com")

    stored = UserProfile.from_json(store.get("currentUser"))
    assert stored.currency == "KZT"
    assert stored.monthly_budget == pytest.approx(1250.5)
    assert stored.notifications_enabled is False
    assert stored.email == "johnny@example.com"

    with pytest.raises(KeyError):
        manager.set_currency("XYZ")
    with pytest.raises(ValueError):
        manager.set_monthly_budget(-1)
    with pytest.raises(ValueError):
        manager.edit_profile("", "Doe", "johnny@example.com")


def test_logout_clears_storage() -> None:
    store = MemoryStore()
    manager = _manager(store)
    asyncio.run(manager.login("john@example.com", "password"))

    manager.logout()

    assert manager.current_user is None
    assert store.get("currentUser") is None


def test_corrupt_stored_profile_is_ignored() -> None:
    manager = _manager(MemoryStore({"currentUser": '{"email": "x"}'}))
    assert manager.current_user is None


def test_category_budgets_round_trip() -> None:
    manager = _manager()

    assert set(manager.category_budgets().values()) == {0.0}
    saved = manager.save_category_budgets({"Food": 250, "Health": 40.5})

    assert saved["Food"] == pytest.approx(250.0)
    assert manager.category_budgets()["Health"] == pytest.approx(40.5)
    with pytest.raises(KeyError):
        manager.save_category_budgets({"Pets": 10})
    with pytest.raises(ValueError):
        manager.save_category_budgets({"Food": -5})


def test_json_file_store_persists_and_tolerates_corruption(tmp_path) -> None:
    path = tmp_path / "prefs" / "preferences.json"
    store = JsonFileStore(path)
    store.set("currentUser", "value")

    assert JsonFileStore(path).get("currentUser") == "value"

    store.delete("currentUser")
    assert JsonFileStore(path).get("currentUser") is None

    path.write_text("{not json", encoding="utf-8")
    assert JsonFileStore(path).get("currentUser") is None


def test_profile_json_uses_camel_case_keys() -> None:
    profile = UserProfile(email="a@b.c", first_name="A", last_name="B")

    payload = json.loads(profile.to_json())

    assert set(payload) == {
        "id",
        "email",
        "firstName",
        "lastName",
        "currency",
        "monthlyBudget",
        "notificationsEnabled",
    }
    with pytest.raises(ValueError):
        UserProfile.from_json("[]")


def test_login_compares_email_exactly() -> None:
    manager = _manager()

    with pytest.raises(AuthenticationError):
        asyncio.run(manager.login(" JOHN@example.com", "password"))
    assert manager.current_user is None


def test_profile_rejects_non_boolean_notification_flag() -> None:
    payload = UserProfile(email="a@b.c", first_name="A", last_name="B").as_dict()
    payload["notificationsEnabled"] = "false"

    with pytest.raises(ValueError):
        UserProfile.from_json(json.dumps(payload))
    assert _manager(MemoryStore({"currentUser": json.dumps(payload)})).current_user is None
