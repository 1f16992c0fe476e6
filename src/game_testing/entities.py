"""
Domain level data model of the game testing catalogue.

Entities are created without an ID (``id is None``); the store assigns one on first persist.
The Game <-> Tester association is held once, on the Game side (``tester_ids``).
Which games a tester works on is a query against the store, never a second stored collection.
"""

from dataclasses import dataclass, field
from typing import Optional

EntityId = int


@dataclass
class Game:
    name: Optional[str] = None
    genre: Optional[str] = None
    platforms: Optional[str] = None
    publisher_id: Optional[EntityId] = None
    tester_ids: set[EntityId] = field(default_factory=set)
    id: Optional[EntityId] = None


@dataclass
class Publisher:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    rating: float = 0.0
    games: list[Game] = field(default_factory=list)
    id: Optional[EntityId] = None


@dataclass
class Tester:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[EntityId] = None
