"""Display helpers for transcripts and the demo driver."""

from __future__ import annotations
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from .config import DEFAULT_CURRENCY

if TYPE_CHECKING:
    from .domain import BorrowRecord, LibraryItem, User


def format_money(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    # plain notation: Decimal("3E+1") should print as 30
    return f"{currency}{amount:f}"


def describe_record(record: "BorrowRecord", currency: str = DEFAULT_CURRENCY) -> str:
    return (
        f"Borrowed by User {record.user_id} -> Item {record.item_id}\n"
        f"   Period: {record.borrow_date.isoformat()} -> {record.due_date.isoformat()}\n"
        f"   Fine Rate: {format_money(record.fine_per_day, currency)}/day"
    )


def describe_items(items: Iterable["LibraryItem"], bullet: str = "   - ") -> str:
    return "\n".join(f"{bullet}{item}" for item in items)


def describe_fine_line(
    user: "User", amount: Decimal, currency: str = DEFAULT_CURRENCY
) -> str:
    return f"- {user}: {format_money(amount, currency)}"
