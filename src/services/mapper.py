"""
Conversion between domain entities and the transfer records of the API layer.

Cycles are cut here: a publisher record nests its games, a game record lists tester IDs only,
and a tester record never mentions games.
"""

from src.api.models import GameData, PublisherData, TesterData
from src.game_testing.entities import Game, Publisher, Tester


# --- entity -> record ---
def publisher_to_record(publisher: Publisher) -> PublisherData:
    games = sorted(publisher.games, key=lambda g: (g.id is None, g.id or 0))
    return PublisherData(
        id=publisher.id,
        name=publisher.name,
        email=publisher.email,
        phone=publisher.phone,
        location=publisher.location,
        rating=publisher.rating,
        games=[game_to_record(g) for g in games],
    )


def game_to_record(game: Game) -> GameData:
    return GameData(
        id=game.id,
        name=game.name,
        genre=game.genre,
        platforms=game.platforms,
        tester_ids=sorted(game.tester_ids),
    )


def tester_to_record(tester: Tester) -> TesterData:
    return TesterData(
        id=tester.id, name=tester.name, email=tester.email, phone=tester.phone
    )


# --- record -> entity ---
def record_to_publisher(record: PublisherData) -> Publisher:
    """Scalar fields only. Games are added through the game operations, never through a publisher save."""
    return Publisher(
        id=record.id,
        name=record.name,
        email=record.email,
        phone=record.phone,
        location=record.location,
        rating=record.rating,
    )


def record_to_game(record: GameData) -> Game:
    """Tester associations and the owning publisher are NOT taken from the record."""
    game = Game(id=record.id)
    copy_game_fields(game, record)
    return game


def record_to_tester(record: TesterData) -> Tester:
    return Tester(id=record.id, name=record.name, email=record.email, phone=record.phone)


def copy_game_fields(game: Game, record: GameData) -> None:
    """Overwrite the descriptive fields of a game (full replacement, absent values become None)."""
    game.name = record.name
    game.genre = record.genre
    game.platforms = record.platforms
