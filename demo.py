from __future__ import annotations
from datetime import date, timedelta
from typing import Optional

from libranet import (
    Audiobook,
    InvalidDurationFormatError,
    InvalidIdFormatError,
    ItemUnavailableError,
    LibraryError,
    LibrarySystem,
    configure_logging,
    parse_duration_days,
    parse_id,
    seed_demo_data,
)
from libranet.formatting import (
    describe_fine_line,
    describe_items,
    describe_record,
    format_money,
)


def demo_flow(today: Optional[date] = None) -> None:
    today = today or date.today()
    sys = LibrarySystem(clock=lambda: today)
    seed_demo_data(sys)
    currency = sys.settings.currency

    aisha = sys.get_user(1)
    vikram = sys.get_user(2)

    # Borrow book
    print(describe_record(sys.borrow_item(101, aisha, "14 days"), currency))

    # Same book again should be refused
    try:
        sys.borrow_item(101, vikram, "7 days")
    except ItemUnavailableError as ex:
        print("Failure:", ex.message)

    # Borrow audiobook and use the transport controls
    print(describe_record(sys.borrow_item(202, vikram, "7 days"), currency))
    audio = sys.get_item(202)
    if isinstance(audio, Audiobook):
        audio.play()
        audio.pause()

    # Return the book 3 days late
    fine = sys.return_item(101, today + timedelta(days=17))
    print("Returned item 101, fine charged:", format_money(fine, currency))

    # Archive e-magazine
    sys.archive_item(303)

    print("\nAudiobooks in catalog:")
    print(describe_items(sys.search_by_kind(Audiobook)))

    try:
        parse_id("12a")
    except InvalidIdFormatError as ex:
        print("Error:", ex.message)

    try:
        parse_duration_days("3fortnights")
    except InvalidDurationFormatError as ex:
        print("Error:", ex.message)

    print("\nUser fines summary:")
    for user, total in sys.fine_summary():
        print(describe_fine_line(user, total, currency))


if __name__ == "__main__":
    configure_logging()
    try:
        demo_flow()
    except LibraryError as ex:
        print("Library error:", ex.message)
