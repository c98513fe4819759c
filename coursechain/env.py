"""Simulated contract environment: ledger time, addresses, authorisation and events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class Event:
    """A published contract event: a tuple of topics and a data payload."""

    topics: tuple
    data: Any


class AuthorizationError(Exception):
    """Raised when an address has not authorised the current call."""

    def __init__(self, address: str) -> None:
        super().__init__(f"address {address!r} has not authorized this call")
        self.address = address


class Env:
    """Execution environment shared by the contracts.

    Holds the ledger timestamp, the list of published events, and the set of
    addresses whose authorisation is mocked for subsequent calls.
    """

    def __init__(self, timestamp: int = 0) -> None:
        self.timestamp = timestamp
        self.events: list[Event] = []
        self.auths: list[str] = []
        self._allow_all = False
        self._allowed: frozenset[str] = frozenset()
        self._counter = itertools.count(1)

    def generate_address(self) -> str:
        """Return a fresh address that has not been handed out before."""
        return f"G{next(self._counter):055d}"

    def require_auth(self, address: str) -> None:
        """Check that ``address`` authorised the call, recording it in ``auths``."""
        if not (self._allow_all or address in self._allowed):
            raise AuthorizationError(address)
        self.auths.append(address)

    def mock_all_auths(self) -> None:
        """Treat every address as having authorised every call."""
        self._allow_all = True
        self._allowed = frozenset()

    def mock_auths(self, addresses: Iterable[str]) -> None:
        """Authorise exactly the given addresses, replacing earlier mocks."""
        self._allow_all = False
        self._allowed = frozenset(addresses)

    def publish(self, topics: Iterable[Any], data: Any) -> None:
        """Record an event with the given topics and data."""
        self.events.append(Event(tuple(topics), data))