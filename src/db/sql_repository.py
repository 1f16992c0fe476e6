"""Implementation of the entity repositories using SQLAlchemy"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import DBGame, DBPublisher, DBTester, game_tester
from src.game_testing.entities import EntityId, Game, Publisher, Tester


class SQLPublisherRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_publisher(self, publisher_id: EntityId) -> Publisher | None:
        """Get publisher (including its games) by ID, if record exists."""
        publisher_db = self.db.get(DBPublisher, publisher_id)
        if publisher_db:
            return self._to_entity(publisher_db)
        return None

    def list_publishers(self) -> list[Publisher]:
        """All stored publishers, in no particular order."""
        return [self._to_entity(p) for p in self.db.scalars(select(DBPublisher))]

    def create_publisher(self, publisher: Publisher) -> Publisher:
        """Store new publisher and return the stored data, with the newly assigned ID."""
        publisher_db = DBPublisher()
        self._copy_fields(publisher_db, publisher)
        self.db.add(publisher_db)
        self.db.flush()
        return self._to_entity(publisher_db)

    def update_publisher(
        self, publisher_id: EntityId, publisher: Publisher
    ) -> Publisher | None:
        """Overwrite all scalar fields of an existing record."""
        publisher_db = self.db.get(DBPublisher, publisher_id)
        if not publisher_db:
            return None
        self._copy_fields(publisher_db, publisher)
        self.db.flush()
        return self._to_entity(publisher_db)

    def delete_publisher(self, publisher_id: EntityId) -> Publisher | None:
        """Remove a publisher's record, together with the games it owns."""
        publisher_db = self.db.get(DBPublisher, publisher_id)
        if not publisher_db:
            return None
        publisher = self._to_entity(publisher_db)
        self.db.delete(publisher_db)
        self.db.flush()
        return publisher

    @staticmethod
    def _copy_fields(publisher_db: DBPublisher, publisher: Publisher) -> None:
        publisher_db.name = publisher.name
        publisher_db.email = publisher.email
        publisher_db.phone = publisher.phone
        publisher_db.location = publisher.location
        publisher_db.rating = publisher.rating

    @staticmethod
    def _to_entity(publisher_db: DBPublisher) -> Publisher:
        """Convert SQLAlchemy model to domain entity."""
        return Publisher(
            id=publisher_db.id,
            name=publisher_db.name,
            email=publisher_db.email,
            phone=publisher_db.phone,
            location=publisher_db.location,
            rating=publisher_db.rating,
            games=[_game_to_entity(g) for g in publisher_db.games],
        )


class SQLGameRepository:
    """Games and (as owning side) the rows of the game_tester association table."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: EntityId) -> Game | None:
        """Get game by ID, if record exists."""
        game_db = self.db.get(DBGame, game_id)
        if game_db:
            return _game_to_entity(game_db)
        return None

    def create_game(self, game: Game) -> Game:
        """Store new game and return the stored data, with the newly assigned ID."""
        game_db = DBGame()
        self._copy_fields(game_db, game)
        self.db.add(game_db)
        self.db.flush()
        return _game_to_entity(game_db)

    def update_game(self, game_id: EntityId, game: Game) -> Game | None:
        """Overwrite an existing record, including its tester associations."""
        game_db = self.db.get(DBGame, game_id)
        if not game_db:
            return None
        self._copy_fields(game_db, game)
        self.db.flush()
        return _game_to_entity(game_db)

    def list_games_for_tester(self, tester_id: EntityId) -> list[Game]:
        """Games associated with a tester (inverse view of Game.tester_ids)."""
        query = (
            select(DBGame)
            .join(game_tester, game_tester.c.game_id == DBGame.id)
            .where(game_tester.c.tester_id == tester_id)
            .order_by(DBGame.id)
        )
        return [_game_to_entity(g) for g in self.db.scalars(query)]

    def _copy_fields(self, game_db: DBGame, game: Game) -> None:
        game_db.name = game.name
        game_db.genre = game.genre
        game_db.platforms = game.platforms
        # Assign through the relationship so a publisher already loaded in this session sees the game too
        game_db.publisher = (
            self.db.get(DBPublisher, game.publisher_id)
            if game.publisher_id is not None
            else None
        )
        game_db.testers = self._fetch_testers(game.tester_ids)

    def _fetch_testers(self, tester_ids: set[EntityId]) -> set[DBTester]:
        if not tester_ids:
            return set()
        query = select(DBTester).where(DBTester.id.in_(tester_ids))
        return set(self.db.scalars(query))


class SQLTesterRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_tester(self, tester_id: EntityId) -> Tester | None:
        """Get tester by ID, if record exists."""
        tester_db = self.db.get(DBTester, tester_id)
        if tester_db:
            return self._to_entity(tester_db)
        return None

    def create_tester(self, tester: Tester) -> Tester:
        """Store new tester and return the stored data, with the newly assigned ID."""
        tester_db = DBTester(name=tester.name, email=tester.email, phone=tester.phone)
        self.db.add(tester_db)
        self.db.flush()
        return self._to_entity(tester_db)

    def list_testers_for_game(self, game_id: EntityId) -> list[Tester]:
        """Testers associated with a game."""
        query = (
            select(DBTester)
            .join(game_tester, game_tester.c.tester_id == DBTester.id)
            .where(game_tester.c.game_id == game_id)
            .order_by(DBTester.id)
        )
        return [self._to_entity(t) for t in self.db.scalars(query)]

    @staticmethod
    def _to_entity(tester_db: DBTester) -> Tester:
        """Convert SQLAlchemy model to domain entity."""
        return Tester(
            id=tester_db.id,
            name=tester_db.name,
            email=tester_db.email,
            phone=tester_db.phone,
        )


class SQLStore:
    """Bundles the SQL repositories around one session, which also defines the transaction scope."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session
        self.publishers = SQLPublisherRepository(db_session)
        self.games = SQLGameRepository(db_session)
        self.testers = SQLTesterRepository(db_session)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit when the block exits cleanly, roll back on any exception."""
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


def _game_to_entity(game_db: DBGame) -> Game:
    """Convert SQLAlchemy model to domain entity."""
    return Game(
        id=game_db.id,
        name=game_db.name,
        genre=game_db.genre,
        platforms=game_db.platforms,
        publisher_id=game_db.publisher_id,
        tester_ids={t.id for t in game_db.testers},
    )
