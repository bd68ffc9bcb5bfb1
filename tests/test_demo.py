"""End-to-end scenario from the circulation desk demo"""

from datetime import date, timedelta
from decimal import Decimal

import demo
from libranet import AvailabilityStatus

from .conftest import TODAY


def test_clean_code_scenario(seeded, aisha):
    record = seeded.borrow_item(101, aisha, "14 days")
    fine = seeded.return_item(101, record.borrow_date + timedelta(days=17))

    assert fine == Decimal("30")
    assert seeded.accumulated_fine(1) == Decimal("30")
    assert seeded.accumulated_fine(2) == Decimal("0")
    assert seeded.get_item(101).status == AvailabilityStatus.AVAILABLE


def test_demo_transcript(capsys):
    demo.demo_flow(today=date(2024, 3, 1))
    out = capsys.readouterr().out

    assert "Borrowed by User 1 -> Item 101" in out
    assert "Period: 2024-03-01 -> 2024-03-15" in out
    assert 'Failure: Item not available: Book: "Clean Code"' in out
    assert 'Audiobook: "Effective Java (Audio)" by Joshua Bloch (ID: 202) - Status: BORROWED' in out
    assert "Error: Invalid ID format: '12a'. Expect digits only." in out
    assert "Error: Unsupported duration unit in: '3fortnights'" in out
    assert "- Aisha (UserID=1): Rs.30" in out
    assert "- Vikram (UserID=2): Rs.0" in out
