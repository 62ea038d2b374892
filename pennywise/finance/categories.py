"""Mini README: Category vocabularies used by the ledger and dashboard.

Structure:
    * TransactionCategory - labels offered when recording a transaction.
    * DashboardCategory - smaller display set used by the spending chart.
    * TransactionKind - coarse kind driving list icons.
    * TrendDirection - month-over-month spending direction.
    * dashboard_category_for / kind_for - label mapping helpers.

Free-form labels collapse into the dashboard set through a fixed, lossy
table: several labels share one bucket and anything unrecognised lands in
Shopping. Aggregates depend on this table, so it must not drift.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class TransactionCategory(str, Enum):
    """Categories a user can pick when adding a transaction."""

    SHOPPING = "Shopping"
    HEALTH = "Health"
    TRANSPORT = "Transport"
    TRANSFER = "Transfer"
    HOUSING = "Housing"
    SUBSCRIPTIONS = "Subscriptions"
    FOOD = "Food"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"

    @classmethod
    def from_str(cls, value: str) -> "TransactionCategory":
        """Coerce arbitrary casing into a known category."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported category: {value}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported category: {value}")


class DashboardCategory(str, Enum):
    """Display buckets for the spending breakdown, in canonical order."""

    SHOPPING = "Shopping"
    HEALTH = "Health"
    TRANSPORT = "Transport"
    HOUSING = "Housing"
    SUBSCRIPTIONS = "Subscriptions"

    @property
    def icon_name(self) -> str:
        return _DASHBOARD_ICONS[self]

    @property
    def color(self) -> str:
        return _DASHBOARD_COLORS[self]


class TransactionKind(str, Enum):
    """Coarse kind used to pick list icons."""

    TRANSFER = "transfer"
    SUBSCRIPTIONS = "subscriptions"
    SHOPPING = "shopping"
    FOOD = "food"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    OTHER = "other"


class TrendDirection(str, Enum):
    """Direction of this month's spending relative to last month."""

    UP = "up"
    DOWN = "down"


FALLBACK_DASHBOARD_CATEGORY = DashboardCategory.SHOPPING

_DASHBOARD_MAPPING: Dict[str, DashboardCategory] = {
    "shopping": DashboardCategory.SHOPPING,
    "health": DashboardCategory.HEALTH,
    "transport": DashboardCategory.TRANSPORT,
    "housing": DashboardCategory.HOUSING,
    "subscriptions": DashboardCategory.SUBSCRIPTIONS,
    "food": DashboardCategory.SHOPPING,
    "entertainment": DashboardCategory.SHOPPING,
    "utilities": DashboardCategory.HOUSING,
    "transfer": DashboardCategory.TRANSPORT,
}

_KIND_MAPPING: Dict[TransactionCategory, TransactionKind] = {
    TransactionCategory.SHOPPING: TransactionKind.SHOPPING,
    TransactionCategory.HEALTH: TransactionKind.OTHER,
    TransactionCategory.TRANSPORT: TransactionKind.OTHER,
    TransactionCategory.TRANSFER: TransactionKind.TRANSFER,
    TransactionCategory.HOUSING: TransactionKind.UTILITIES,
    TransactionCategory.SUBSCRIPTIONS: TransactionKind.SUBSCRIPTIONS,
    TransactionCategory.FOOD: TransactionKind.FOOD,
    TransactionCategory.ENTERTAINMENT: TransactionKind.ENTERTAINMENT,
    TransactionCategory.UTILITIES: TransactionKind.UTILITIES,
}

_DASHBOARD_ICONS: Dict[DashboardCategory, str] = {
    DashboardCategory.SHOPPING: "cart",
    DashboardCategory.HEALTH: "heart",
    DashboardCategory.TRANSPORT: "car",
    DashboardCategory.HOUSING: "house",
    DashboardCategory.SUBSCRIPTIONS: "play.tv",
}

_DASHBOARD_COLORS: Dict[DashboardCategory, str] = {
    DashboardCategory.SHOPPING: "orange",
    DashboardCategory.HEALTH: "pink",
    DashboardCategory.TRANSPORT: "blue",
    DashboardCategory.HOUSING: "green",
    DashboardCategory.SUBSCRIPTIONS: "gold",
}


def dashboard_category_for(label: str) -> DashboardCategory:
    """Map a free-form category label onto the dashboard display set."""

    return _DASHBOARD_MAPPING.get(label.strip().lower(), FALLBACK_DASHBOARD_CATEGORY)


def kind_for(label: str) -> TransactionKind:
    """Return the list-icon kind for a category label, ``OTHER`` if unknown."""

    try:
        return _KIND_MAPPING[TransactionCategory.from_str(label)]
    except ValueError:
        return TransactionKind.OTHER
