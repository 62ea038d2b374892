"""Mini README: Finance core for the Pennywise dashboard.

The ledger owns every recorded transaction and derives income, expense,
balance, per-category and month-over-month figures on demand. Category
vocabularies and the lossy display mapping live beside it so screens and
the ledger agree on how labels collapse into dashboard buckets.
"""

from .categories import (
    DashboardCategory,
    TransactionCategory,
    TransactionKind,
    TrendDirection,
    dashboard_category_for,
    kind_for,
)
from .ledger import CategorySpending, Transaction, TransactionLedger, build_transaction

__all__ = [
    "CategorySpending",
    "DashboardCategory",
    "Transaction",
    "TransactionCategory",
    "TransactionKind",
    "TransactionLedger",
    "TrendDirection",
    "build_transaction",
    "dashboard_category_for",
    "kind_for",
]
