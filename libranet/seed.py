from __future__ import annotations
import logging

from .api import LibrarySystem
from .parsers import parse_id

logger = logging.getLogger(__name__)


def seed_demo_data(sys: LibrarySystem) -> None:
    # items (ids go through the parser the way a front desk would read them)
    sys.add_book(parse_id("101"), "Clean Code", "Robert C. Martin", page_count=464)
    sys.add_audiobook(
        parse_id("202"), "Effective Java (Audio)", "Joshua Bloch", playback_seconds=3600
    )
    sys.add_emagazine(parse_id("303"), "Tech Monthly", "Editor Team", issue_number=42)

    # users
    sys.register_user(1, "Aisha")
    sys.register_user(2, "Vikram")

    logger.info(f"[seed] users: {[u.name for u in sys.users.list_all()]}")
    logger.info(f"[seed] items: {[it.title for it in sys.items.list_all()]}")
