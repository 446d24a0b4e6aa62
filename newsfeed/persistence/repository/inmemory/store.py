"""Shared state behind the in-memory repositories.

One store plays the part of the database: repositories created for
different requests see each other's writes when they share a store.
"""

import asyncio
import itertools
from collections import Counter, defaultdict
from typing import Iterator

from newsfeed.domain.model import Comment, Follow, News, Save, User, Vote


class InMemoryStore:
    """Tables, ID sequences and ledger locks for in-memory persistence."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.news: dict[int, News] = {}
        self.comments: dict[int, Comment] = {}
        self.votes: dict[int, Vote] = {}
        self.saves: dict[int, Save] = {}
        self.follows: dict[int, Follow] = {}
        self.locks: dict[tuple, asyncio.Lock] = {}
        # Holders and waiters per lock key
        self.lock_users: Counter[tuple] = Counter()
        self._sequences: dict[str, Iterator[int]] = defaultdict(
            lambda: itertools.count(1)
        )

    def next_id(self, table: str) -> int:
        """Next value of a table's ID sequence (strictly increasing)."""
        return next(self._sequences[table])

    def bump_sequence(self, table: str, used_id: int) -> None:
        """Make sure the sequence never hands out an explicitly used ID."""
        sequence = self._sequences[table]
        peek = next(sequence)
        self._sequences[table] = itertools.count(max(peek, used_id + 1))
