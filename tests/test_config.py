"""Tests for environment-driven settings and logging setup"""

import logging
from decimal import Decimal

from libranet import LibrarySystem, Settings, User, configure_logging
from libranet.formatting import describe_fine_line, format_money


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LIBRANET_FINE_PER_DAY", "LIBRANET_CURRENCY", "LIBRANET_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        s = Settings.from_env()
        assert s.fine_per_day == Decimal("10")
        assert s.currency == "Rs."
        assert s.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LIBRANET_FINE_PER_DAY", "2.50")
        monkeypatch.setenv("LIBRANET_CURRENCY", "$")
        monkeypatch.setenv("LIBRANET_LOG_LEVEL", "debug")

        s = Settings.from_env()
        assert s.fine_per_day == Decimal("2.50")
        assert s.currency == "$"
        assert s.log_level == "DEBUG"

    def test_invalid_fine_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("LIBRANET_FINE_PER_DAY", "ten")
        with caplog.at_level(logging.WARNING, logger="libranet.config"):
            assert Settings.from_env().fine_per_day == Decimal("10")
        assert "Falling back" in caplog.text

    def test_negative_fine_falls_back(self, monkeypatch):
        monkeypatch.setenv("LIBRANET_FINE_PER_DAY", "-1")
        assert Settings.from_env().fine_per_day == Decimal("10")

    def test_system_picks_up_environment(self, monkeypatch):
        monkeypatch.setenv("LIBRANET_FINE_PER_DAY", "5")
        sys = LibrarySystem()
        assert sys.add_book(1, "Title", "Author", page_count=1).fine_per_day == Decimal("5")


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_money_formatting():
    assert format_money(Decimal("30")) == "Rs.30"
    assert format_money(Decimal("3E+1"), "$") == "$30"
    assert describe_fine_line(User(2, "Vikram"), Decimal("0")) == "- Vikram (UserID=2): Rs.0"
