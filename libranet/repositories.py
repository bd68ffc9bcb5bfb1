from __future__ import annotations
from contextlib import contextmanager
from decimal import Decimal
from typing import Dict, Iterator, List, Optional
import threading

from .domain import LibraryItem, User


class ItemRepo:
    """
    Items keyed by id, each paired with its own exclusive guard.

    The repo lock only protects the mappings; per-item state changes happen
    under ``guard(item_id)`` so different items never contend.
    """

    def __init__(self) -> None:
        self._items: Dict[int, LibraryItem] = {}
        self._guards: Dict[int, threading.Lock] = {}
        self._lock = threading.RLock()

    def add(self, item: LibraryItem) -> None:
        with self._lock:
            if item.item_id in self._items:
                raise ValueError(f"Duplicate item id: {item.item_id}")
            self._items[item.item_id] = item
            self._guards[item.item_id] = threading.Lock()

    def get(self, item_id: int) -> Optional[LibraryItem]:
        with self._lock:
            return self._items.get(item_id)

    def list_all(self) -> List[LibraryItem]:
        with self._lock:
            return list(self._items.values())

    @contextmanager
    def guard(self, item_id: int) -> Iterator[None]:
        with self._lock:
            lock = self._guards[item_id]
        with lock:
            yield


class UserRepo:
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._lock = threading.RLock()

    def add(self, user: User) -> None:
        with self._lock:
            if user.user_id in self._users:
                raise ValueError(f"Duplicate user id: {user.user_id}")
            self._users[user.user_id] = user

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list_all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())


class FineLedger:
    """Running fine totals per user. Totals only grow."""

    def __init__(self) -> None:
        self._totals: Dict[int, Decimal] = {}
        self._lock = threading.Lock()

    def add(self, user_id: int, amount: Decimal) -> Decimal:
        with self._lock:
            total = self._totals.get(user_id, Decimal("0")) + amount
            self._totals[user_id] = total
            return total

    def total_for(self, user_id: int) -> Decimal:
        with self._lock:
            return self._totals.get(user_id, Decimal("0"))
