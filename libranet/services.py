from __future__ import annotations
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, List, Optional, Tuple, Type, Union
import logging

from .config import Settings
from .domain import (
    Audiobook,
    Book,
    BorrowRecord,
    EMagazine,
    ItemKind,
    LibraryItem,
    User,
)
from .errors import (
    InvalidDurationFormatError,
    ItemNotBorrowedError,
    ItemNotFoundError,
    ItemUnavailableError,
)
from .parsers import parse_duration_days
from .repositories import FineLedger, ItemRepo, UserRepo

logger = logging.getLogger(__name__)

Clock = Callable[[], date]
KindFilter = Union[ItemKind, Type[LibraryItem]]


class UserService:
    def __init__(self, users: UserRepo) -> None:
        self.users = users

    def register_user(self, user_id: int, name: str) -> User:
        u = User(user_id=user_id, name=name)
        self.users.add(u)
        return u

    def get(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)


class CatalogService:
    def __init__(self, items: ItemRepo, settings: Settings) -> None:
        self.items = items
        self.settings = settings

    def add_item(self, item: LibraryItem) -> LibraryItem:
        self.items.add(item)
        logger.debug(f"[catalog] added {item}")
        return item

    def add_book(self, item_id: int, title: str, author: str, page_count: int) -> Book:
        book = Book(item_id, title, author, self.settings.fine_per_day, page_count)
        self.add_item(book)
        return book

    def add_audiobook(
        self, item_id: int, title: str, author: str, playback_seconds: int
    ) -> Audiobook:
        audio = Audiobook(
            item_id, title, author, self.settings.fine_per_day, playback_seconds
        )
        self.add_item(audio)
        return audio

    def add_emagazine(
        self, item_id: int, title: str, author: str, issue_number: int
    ) -> EMagazine:
        mag = EMagazine(item_id, title, author, self.settings.fine_per_day, issue_number)
        self.add_item(mag)
        return mag

    def get_item(self, item_id: int) -> LibraryItem:
        item = self.items.get(item_id)
        if item is None:
            raise ItemNotFoundError(f"No item with id: {item_id}")
        return item

    def search_by_kind(self, kind: KindFilter) -> List[LibraryItem]:
        if isinstance(kind, ItemKind):
            return [it for it in self.items.list_all() if it.kind == kind]
        return [it for it in self.items.list_all() if isinstance(it, kind)]

    def archive_item(self, item_id: int) -> bool:
        item = self.get_item(item_id)
        if not isinstance(item, EMagazine):
            raise TypeError(f"Only e-magazines can be archived: {item}")
        with self.items.guard(item_id):
            return item.archive_issue()

    def inventory(self) -> List[Tuple[ItemKind, int, int]]:
        """
        Returns tuples of (kind, total_items, available_items), one per kind.
        """
        report: List[Tuple[ItemKind, int, int]] = []
        for kind in ItemKind:
            matching = self.search_by_kind(kind)
            available = sum(1 for it in matching if it.is_available)
            report.append((kind, len(matching), available))
        return report


class FineService:
    def __init__(self, ledger: FineLedger) -> None:
        self.ledger = ledger

    def assess_return(self, record: BorrowRecord, returned_on: date) -> Decimal:
        """
        Charge ``fine_per_day`` for each day past the due date and add it to
        the borrower's running total. On-time returns cost nothing.
        """
        overdue_days = record.overdue_days(returned_on)
        if overdue_days <= 0:
            logger.info(
                f"[return] user {record.user_id} returned item {record.item_id} on time. No fine."
            )
            return Decimal("0")

        fine = record.fine_per_day * overdue_days
        total = self.ledger.add(record.user_id, fine)
        logger.info(
            f"[return] user {record.user_id} returned item {record.item_id} late by "
            f"{overdue_days} days -> fine {fine:f} (total {total:f})"
        )
        return fine

    def accumulated(self, user_id: int) -> Decimal:
        return self.ledger.total_for(user_id)


class CirculationService:
    def __init__(
        self,
        catalog: CatalogService,
        fines: FineService,
        clock: Clock = date.today,
    ) -> None:
        self.catalog = catalog
        self.items = catalog.items
        self.fines = fines
        self.clock = clock

    def borrow_item(
        self,
        item_id: int,
        user: User,
        duration: str,
        today: Optional[date] = None,
    ) -> BorrowRecord:
        item = self.catalog.get_item(item_id)
        with self.items.guard(item_id):
            if not item.is_available:
                raise ItemUnavailableError(f"Item not available: {item}")

            days = parse_duration_days(duration)
            borrow_date = today or self.clock()
            try:
                due_date = borrow_date + timedelta(days=days)
            except (OverflowError, ValueError):
                raise InvalidDurationFormatError(f"Duration out of range: '{duration}'")
            record = BorrowRecord(
                user_id=user.user_id,
                item_id=item_id,
                borrow_date=borrow_date,
                due_date=due_date,
                fine_per_day=item.fine_per_day,
            )
            item.attach_borrow_record(record)

        logger.info(
            f"[borrow] user {user.user_id} borrowed item {item_id} until {record.due_date.isoformat()}"
        )
        return record

    def return_item(self, item_id: int, return_date: Optional[date] = None) -> Decimal:
        item = self.catalog.get_item(item_id)
        with self.items.guard(item_id):
            record = item.current_borrow
            if record is None:
                raise ItemNotBorrowedError(f"Item not currently borrowed: {item}")
            fine = self.fines.assess_return(record, return_date or self.clock())
            item.detach_borrow_record()
        return fine

    def active_loans(self) -> List[BorrowRecord]:
        return [
            it.current_borrow
            for it in self.items.list_all()
            if it.current_borrow is not None
        ]

    def list_overdue_loans(self, as_of: Optional[date] = None) -> List[BorrowRecord]:
        as_of = as_of or self.clock()
        return [r for r in self.active_loans() if r.due_date < as_of]
