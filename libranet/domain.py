from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum, auto
from typing import ClassVar, Optional
import logging

from .config import DEFAULT_FINE_PER_DAY

logger = logging.getLogger(__name__)


class AvailabilityStatus(Enum):
    AVAILABLE = auto()
    BORROWED = auto()
    ARCHIVED = auto()


class ItemKind(Enum):
    BOOK = "Book"
    AUDIOBOOK = "Audiobook"
    EMAGAZINE = "EMagazine"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    user_id: int
    name: str

    def __str__(self) -> str:
        return f"{self.name} (UserID={self.user_id})"


@dataclass(frozen=True)
class BorrowRecord:
    user_id: int
    item_id: int
    borrow_date: date
    due_date: date
    fine_per_day: Decimal

    def overdue_days(self, on: date) -> int:
        """Whole days past the due date; zero or negative when on time."""
        return (on - self.due_date).days

    def __str__(self) -> str:
        from .formatting import describe_record

        return describe_record(self)


@dataclass
class LibraryItem:
    item_id: int
    title: str
    author: str
    fine_per_day: Decimal = DEFAULT_FINE_PER_DAY
    status: AvailabilityStatus = field(default=AvailabilityStatus.AVAILABLE, init=False)
    current_borrow: Optional[BorrowRecord] = field(default=None, init=False, repr=False)

    kind: ClassVar[ItemKind]

    def __post_init__(self) -> None:
        if self.item_id <= 0:
            raise ValueError(f"Item id must be positive, got {self.item_id}")
        if not self.title:
            raise ValueError("Title is required")
        if not self.author:
            raise ValueError("Author is required")
        # via str so a float rate like 0.1 stays exactly 0.1
        self.fine_per_day = Decimal(str(self.fine_per_day))

    @property
    def is_available(self) -> bool:
        return self.status == AvailabilityStatus.AVAILABLE

    # called by the catalog while holding this item's guard
    def attach_borrow_record(self, record: BorrowRecord) -> None:
        self.current_borrow = record
        self.status = AvailabilityStatus.BORROWED

    def detach_borrow_record(self) -> Optional[BorrowRecord]:
        record = self.current_borrow
        self.current_borrow = None
        self.status = AvailabilityStatus.AVAILABLE
        return record

    def __str__(self) -> str:
        return (
            f'{self.kind.display_name}: "{self.title}" by {self.author} '
            f"(ID: {self.item_id}) - Status: {self.status.name}"
        )


@dataclass
class Book(LibraryItem):
    page_count: int = 0

    kind: ClassVar[ItemKind] = ItemKind.BOOK


@dataclass
class Audiobook(LibraryItem):
    playback_seconds: int = 0
    is_playing: bool = field(default=False, init=False)

    kind: ClassVar[ItemKind] = ItemKind.AUDIOBOOK

    def play(self) -> None:
        self.is_playing = True
        logger.info(f'[audio] playing audiobook: "{self.title}"')

    def pause(self) -> None:
        self.is_playing = False
        logger.info(f'[audio] paused: "{self.title}"')

    def stop(self) -> None:
        self.is_playing = False
        logger.info(f'[audio] stopped: "{self.title}"')


@dataclass
class EMagazine(LibraryItem):
    issue_number: int = 0
    archived: bool = field(default=False, init=False)

    kind: ClassVar[ItemKind] = ItemKind.EMAGAZINE

    def archive_issue(self) -> bool:
        """
        Permanently retire this issue. Returns False when it was already
        archived (nothing changes and nothing is logged).
        """
        if self.archived:
            return False
        self.archived = True
        self.status = AvailabilityStatus.ARCHIVED
        logger.info(
            f'[archive] archived e-magazine issue: {self.issue_number} ("{self.title}")'
        )
        return True

    def detach_borrow_record(self) -> Optional[BorrowRecord]:
        record = super().detach_borrow_record()
        # an issue archived mid-loan stays archived after the return
        if self.archived:
            self.status = AvailabilityStatus.ARCHIVED
        return record
