"""Mini README: In-memory transaction ledger and its derived aggregates.

Structure:
    * Transaction - immutable ledger entry; direction carried by ``is_expense``.
    * CategorySpending - derived per-bucket expense total and share.
    * TransactionLedger - owns the ordered transactions and computes totals,
      the category breakdown and the monthly trend.
    * build_transaction - validates raw form input into a Transaction.

The ledger is synchronous and keeps no caches: every aggregate is
recomputed from the current list on access. New entries are prepended, so
the list reads newest-insertion first. A ``clock`` callable supplies
"today" so monthly figures are reproducible under test.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Union
from uuid import uuid4

from ..logging_utils import get_logger
from .categories import (
    DashboardCategory,
    TransactionCategory,
    TransactionKind,
    TrendDirection,
    dashboard_category_for,
    kind_for,
)

LOGGER = get_logger(__name__)

LEGACY_LAST_MONTH_FACTOR = 0.9


def _new_transaction_id() -> str:
    return uuid4().hex


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    title: str
    amount: float
    category: str
    date: date
    is_expense: bool
    id: str = field(default_factory=_new_transaction_id)

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount) or self.amount < 0:
            raise ValueError(
                f"Transaction amount must be a finite non-negative number, got {self.amount}"
            )

    @property
    def kind(self) -> TransactionKind:
        """Coarse kind derived from the category label."""

        return kind_for(self.category)

    @property
    def formatted_amount(self) -> str:
        sign = "-" if self.is_expense else "+"
        return f"{sign}${self.amount:.2f}"

    @property
    def formatted_date(self) -> str:
        return f"{self.date:%b} {self.date.day}, {self.date.year}"

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount,
            "category": self.category,
            "date": self.date.isoformat(),
            "is_expense": self.is_expense,
            "kind": self.kind.value,
            "formatted_amount": self.formatted_amount,
            "formatted_date": self.formatted_date,
        }


@dataclass(frozen=True, slots=True)
class CategorySpending:
    """Expense total for one dashboard bucket and its share of all expenses."""

    category: DashboardCategory
    amount: float
    percentage: float

    @property
    def formatted_amount(self) -> str:
        return f"${self.amount:.2f}"

    @property
    def formatted_percentage(self) -> str:
        return f"{int(self.percentage * 100)}%"

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category.value,
            "amount": self.amount,
            "percentage": self.percentage,
            "icon_name": self.category.icon_name,
            "color": self.category.color,
            "formatted_amount": self.formatted_amount,
            "formatted_percentage": self.formatted_percentage,
        }


def build_transaction(
    title: str,
    amount: Union[str, float],
    category: str,
    *,
    is_expense: bool,
    occurred_on: date,
) -> Transaction:
    """Validate raw form values and return a new transaction.

    Titles are stripped and must not be empty. Amounts may arrive as text
    from a form field; they must parse as a finite, non-negative number.
    Raises ``ValueError`` describing the first problem found.
    """

    cleaned_title = (title or "").strip()
    if not cleaned_title:
        raise ValueError("A description is required.")
    try:
        parsed_amount = float(str(amount).strip())
    except ValueError as error:
        raise ValueError(f"Amount '{amount}' is not a number.") from error
    if not math.isfinite(parsed_amount):
        raise ValueError(f"Amount '{amount}' is not a finite number.")
    if parsed_amount < 0:
        raise ValueError("Amount must not be negative; choose Expense or Income instead.")
    cleaned_category = TransactionCategory.from_str(category).value
    return Transaction(
        title=cleaned_title,
        amount=parsed_amount,
        category=cleaned_category,
        date=occurred_on,
        is_expense=is_expense,
    )


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


class TransactionLedger:
    """Own the ordered transaction list and expose derived aggregates."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        clock: Callable[[], date] = date.today,
        legacy_last_month: bool = False,
    ) -> None:
        self._clock = clock
        self._legacy_last_month = legacy_last_month
        if transactions is None:
            self._transactions: List[Transaction] = self._build_sample_transactions()
        else:
            self._transactions = list(transactions)
        LOGGER.debug(
            "Transaction ledger initialised with %s transactions", len(self._transactions)
        )

    def today(self) -> date:
        """Return the ledger clock's current date."""

        return self._clock()

    def _build_sample_transactions(self) -> List[Transaction]:
        """Create the demo entries shown on first launch."""

        today = self.today()
        return [
            Transaction(
                title="Monthly Salary",
                amount=3500.00,
                category=TransactionCategory.TRANSFER.value,
                date=today - timedelta(days=2),
                is_expense=False,
            ),
            Transaction(
                title="Netflix",
                amount=15.99,
                category=TransactionCategory.SUBSCRIPTIONS.value,
                date=today - timedelta(days=1),
                is_expense=True,
            ),
            Transaction(
                title="Grocery Shopping",
                amount=89.50,
                category=TransactionCategory.SHOPPING.value,
                date=today - timedelta(days=3),
                is_expense=True,
            ),
            Transaction(
                title="Electricity Bill",
                amount=120.75,
                category=TransactionCategory.UTILITIES.value,
                date=today - timedelta(days=5),
                is_expense=True,
            ),
            Transaction(
                title="Freelance Work",
                amount=850.00,
                category=TransactionCategory.TRANSFER.value,
                date=today - timedelta(days=7),
                is_expense=False,
            ),
        ]

    def add(self, transaction: Transaction) -> None:
        """Insert a transaction at the front of the ledger."""

        self._transactions.insert(0, transaction)
        LOGGER.info(
            "Recorded %s '%s' of %.2f in %s",
            "expense" if transaction.is_expense else "income",
            transaction.title,
            transaction.amount,
            transaction.category,
        )

    @property
    def transactions(self) -> List[Transaction]:
        """Return a copy of the transactions, newest insertion first."""

        return list(self._transactions)

    def search(self, text: str) -> List[Transaction]:
        """Return transactions whose title contains ``text`` ignoring case."""

        needle = text.strip().casefold()
        if not needle:
            return self.transactions
        return [
            transaction
            for transaction in self._transactions
            if needle in transaction.title.casefold()
        ]

    @property
    def total_income(self) -> float:
        return sum(
            (transaction.amount for transaction in self._transactions if not transaction.is_expense),
            0.0,
        )

    @property
    def total_expenses(self) -> float:
        return sum(
            (transaction.amount for transaction in self._transactions if transaction.is_expense),
            0.0,
        )

    @property
    def balance(self) -> float:
        """Income minus expenses; negative when spending exceeds income."""

        return self.total_income - self.total_expenses

    @property
    def category_spending(self) -> List[CategorySpending]:
        """Expense totals per dashboard bucket, largest first.

        Buckets without any expense are omitted. Equal amounts keep the
        ``DashboardCategory`` declaration order.
        """

        total_expenses = self.total_expenses
        amounts: Dict[DashboardCategory, float] = {}
        for transaction in self._transactions:
            if not transaction.is_expense:
                continue
            bucket = dashboard_category_for(transaction.category)
            amounts[bucket] = amounts.get(bucket, 0.0) + transaction.amount

        breakdown = [
            CategorySpending(
                category=bucket,
                amount=amounts[bucket],
                percentage=amounts[bucket] / total_expenses if total_expenses > 0 else 0.0,
            )
            for bucket in DashboardCategory
            if bucket in amounts
        ]
        return sorted(breakdown, key=lambda spending: spending.amount, reverse=True)

    def month_expenses(self, year: int, month: int) -> float:
        """Sum expenses dated within the given calendar month."""

        return sum(
            (
                transaction.amount
                for transaction in self._transactions
                if transaction.is_expense
                and transaction.date.year == year
                and transaction.date.month == month
            ),
            0.0,
        )

    @property
    def this_month_expenses(self) -> float:
        today = self.today()
        return self.month_expenses(today.year, today.month)

    @property
    def last_month_expenses(self) -> float:
        """Expenses of the previous calendar month.

        With ``legacy_last_month`` enabled this returns 90% of the current
        month instead, matching the figure earlier builds displayed.
        """

        if self._legacy_last_month:
            return self.this_month_expenses * LEGACY_LAST_MONTH_FACTOR
        today = self.today()
        return self.month_expenses(*_previous_month(today.year, today.month))

    @property
    def monthly_trend(self) -> TrendDirection:
        if self.this_month_expenses > self.last_month_expenses:
            return TrendDirection.UP
        return TrendDirection.DOWN

    def export_snapshot(self, transactions: Optional[Iterable[Transaction]] = None) -> Dict[str, object]:
        """Export totals, breakdown and transactions for JSON responses."""

        listed = self.transactions if transactions is None else list(transactions)
        return {
            "transaction_count": len(self._transactions),
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "balance": self.balance,
            "this_month_expenses": self.this_month_expenses,
            "last_month_expenses": self.last_month_expenses,
            "monthly_trend": self.monthly_trend.value,
            "category_spending": [spending.as_dict() for spending in self.category_spending],
            "transactions": [transaction.as_dict() for transaction in listed],
        }
