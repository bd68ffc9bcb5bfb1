"""
LibraNet: an in-memory circulation desk for books, audiobooks and e-magazines.

Re-exports the errors, parsers, domain types, services and the
LibrarySystem entry point so callers can import from one place.
"""

from .errors import (
    LibraryError,
    ItemNotFoundError,
    ItemUnavailableError,
    ItemNotBorrowedError,
    InvalidFormatError,
    InvalidIdFormatError,
    InvalidDurationFormatError,
    UnsupportedDurationUnitError,
)

from .parsers import MAX_ID, parse_id, parse_duration_days

from .domain import (
    AvailabilityStatus,
    ItemKind,
    User,
    BorrowRecord,
    LibraryItem,
    Book,
    Audiobook,
    EMagazine,
)

from .repositories import (
    ItemRepo,
    UserRepo,
    FineLedger,
)

from .services import (
    UserService,
    CatalogService,
    FineService,
    CirculationService,
)

from .config import Settings, configure_logging
from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # errors
    "LibraryError",
    "ItemNotFoundError",
    "ItemUnavailableError",
    "ItemNotBorrowedError",
    "InvalidFormatError",
    "InvalidIdFormatError",
    "InvalidDurationFormatError",
    "UnsupportedDurationUnitError",
    # parsers
    "MAX_ID",
    "parse_id",
    "parse_duration_days",
    # domain
    "AvailabilityStatus",
    "ItemKind",
    "User",
    "BorrowRecord",
    "LibraryItem",
    "Book",
    "Audiobook",
    "EMagazine",
    # repos
    "ItemRepo",
    "UserRepo",
    "FineLedger",
    # services
    "UserService",
    "CatalogService",
    "FineService",
    "CirculationService",
    # config
    "Settings",
    "configure_logging",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
