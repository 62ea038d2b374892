"""Mini README: User profile model and display currency table.

Structure:
    * Currency - code, display name and symbol for the currency picker.
    * CURRENCIES - supported display currencies in picker order.
    * UserProfile - account details persisted under the ``currentUser`` key.

Changing currency only affects how amounts are labelled; nothing is
converted. Profiles serialise to the camelCase JSON shape shared with
earlier builds of the app so stored sessions keep loading.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Currency:
    code: str
    name: str
    symbol: str


CURRENCIES: List[Currency] = [
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("AUD", "Australian Dollar", "A$"),
    Currency("CNY", "Chinese Yuan", "¥"),
    Currency("KZT", "Kazakhstani Tenge", "₸"),
]


def find_currency(code: str) -> Currency:
    """Look up a supported currency by ISO code, ignoring case."""

    normalised = code.strip().upper()
    for currency in CURRENCIES:
        if currency.code == normalised:
            return currency
    raise KeyError(f"Unsupported currency '{code}'")


@dataclass(slots=True)
class UserProfile:
    """Account details shown on the profile screen."""

    email: str
    first_name: str
    last_name: str
    currency: str = "USD"
    monthly_budget: float = 0.0
    notifications_enabled: bool = True
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def as_dict(self) -> Dict[str, object]:
        """Return the persisted camelCase representation."""

        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "currency": self.currency,
            "monthlyBudget": self.monthly_budget,
            "notificationsEnabled": self.notifications_enabled,
        }

    def to_json(self) -> str:
        return json.dumps(self.as_dict())

    @classmethod
    def from_json(cls, payload: str) -> "UserProfile":
        """Parse a stored profile, raising ``ValueError`` when malformed."""

        try:
            data = json.loads(payload)
        except json.JSONDecodeError as error:
            raise ValueError("Stored profile is not valid JSON.") from error
        if not isinstance(data, dict):
            raise ValueError("Stored profile must be a JSON object.")
        notifications_enabled = data.get("notificationsEnabled", True)
        if not isinstance(notifications_enabled, bool):
            raise ValueError("Stored profile has a non-boolean notificationsEnabled value.")
        try:
            return cls(
                id=str(data["id"]),
                email=str(data["email"]),
                first_name=str(data["firstName"]),
                last_name=str(data["lastName"]),
                currency=str(data.get("currency", "USD")),
                monthly_budget=float(data.get("monthlyBudget", 0.0)),
                notifications_enabled=notifications_enabled,
            )
        except KeyError as error:
            raise ValueError(f"Stored profile is missing field {error}") from error
        except (TypeError, ValueError) as error:
            raise ValueError(f"Stored profile has an invalid value: {error}") from error
