from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

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
from .repositories import FineLedger, ItemRepo, UserRepo
from .services import (
    CatalogService,
    CirculationService,
    Clock,
    FineService,
    KindFilter,
    UserService,
)


class LibrarySystem:
    """
    The circulation desk: owns the item, user and fine stores and routes
    borrow, return, archive and reporting calls to the services.

    One instance is one catalog: build it once and share it by reference.
    ``clock`` supplies "today" whenever a caller omits the date.
    """

    def __init__(
        self, settings: Optional[Settings] = None, clock: Clock = date.today
    ) -> None:
        self.settings = settings or Settings.from_env()

        # repos
        self.users = UserRepo()
        self.items = ItemRepo()
        self.fines = FineLedger()

        # services
        self.user_service = UserService(self.users)
        self.catalog = CatalogService(self.items, self.settings)
        self.fine_service = FineService(self.fines)
        self.circulation = CirculationService(self.catalog, self.fine_service, clock)

    # ---- users
    def register_user(self, user_id: int, name: str) -> User:
        return self.user_service.register_user(user_id, name)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.user_service.get(user_id)

    # ---- catalog
    def add_item(self, item: LibraryItem) -> LibraryItem:
        return self.catalog.add_item(item)

    def add_book(self, item_id: int, title: str, author: str, page_count: int) -> Book:
        return self.catalog.add_book(item_id, title, author, page_count)

    def add_audiobook(
        self, item_id: int, title: str, author: str, playback_seconds: int
    ) -> Audiobook:
        return self.catalog.add_audiobook(item_id, title, author, playback_seconds)

    def add_emagazine(
        self, item_id: int, title: str, author: str, issue_number: int
    ) -> EMagazine:
        return self.catalog.add_emagazine(item_id, title, author, issue_number)

    def get_item(self, item_id: int) -> LibraryItem:
        return self.catalog.get_item(item_id)

    def search_by_kind(self, kind: KindFilter) -> List[LibraryItem]:
        return self.catalog.search_by_kind(kind)

    def archive_item(self, item_id: int) -> bool:
        return self.catalog.archive_item(item_id)

    # ---- circulation
    def borrow_item(
        self, item_id: int, user: User, duration: str, today: Optional[date] = None
    ) -> BorrowRecord:
        return self.circulation.borrow_item(item_id, user, duration, today)

    def return_item(self, item_id: int, return_date: Optional[date] = None) -> Decimal:
        return self.circulation.return_item(item_id, return_date)

    def active_loans(self) -> List[BorrowRecord]:
        return self.circulation.active_loans()

    # ---- fines
    def accumulated_fine(self, user_id: int) -> Decimal:
        return self.fine_service.accumulated(user_id)

    # ---- reporting
    def report_overdue(self, as_of: Optional[date] = None) -> List[BorrowRecord]:
        return self.circulation.list_overdue_loans(as_of)

    def report_inventory(self) -> List[Tuple[ItemKind, int, int]]:
        return self.catalog.inventory()

    def fine_summary(self) -> List[Tuple[User, Decimal]]:
        return [(u, self.accumulated_fine(u.user_id)) for u in self.users.list_all()]
