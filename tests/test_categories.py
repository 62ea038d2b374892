"""Mini README: Tests for category vocabularies and the dashboard mapping."""

from __future__ import annotations

import pytest

from pennywise.finance import (
    DashboardCategory,
    TransactionCategory,
    TransactionKind,
    dashboard_category_for,
    kind_for,
)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Shopping", DashboardCategory.SHOPPING),
        ("Health", DashboardCategory.HEALTH),
        ("Transport", DashboardCategory.TRANSPORT),
        ("Housing", DashboardCategory.HOUSING),
        ("Subscriptions", DashboardCategory.SUBSCRIPTIONS),
        ("Food", DashboardCategory.SHOPPING),
        ("Entertainment", DashboardCategory.SHOPPING),
        ("Utilities", DashboardCategory.HOUSING),
        ("Transfer", DashboardCategory.TRANSPORT),
        ("utilities", DashboardCategory.HOUSING),
        ("Pets", DashboardCategory.SHOPPING),
        ("", DashboardCategory.SHOPPING),
    ],
)
def test_dashboard_mapping_table(label: str, expected: DashboardCategory) -> None:
    assert dashboard_category_for(label) is expected


def test_every_transaction_category_has_a_kind() -> None:
    kinds = {category: kind_for(category.value) for category in TransactionCategory}

    assert kinds[TransactionCategory.HEALTH] is TransactionKind.OTHER
    assert kinds[TransactionCategory.FOOD] is TransactionKind.FOOD
    assert kind_for("Unknown label") is TransactionKind.OTHER


def test_from_str_ignores_case_and_rejects_unknown() -> None:
    assert TransactionCategory.from_str("  entertainment ") is TransactionCategory.ENTERTAINMENT
    with pytest.raises(ValueError):
        TransactionCategory.from_str("Groceries")


def test_dashboard_categories_expose_icons_and_colors() -> None:
    assert DashboardCategory.HOUSING.icon_name == "house"
    assert all(category.color for category in DashboardCategory)
