"""Orchestration of communication from API router to domain and persistence layers (and the reverse direction)."""

import logging

from src.api.models import GameData, PublisherData, TesterData
from src.core.exceptions import NotFoundError, OwnershipMismatchError
from src.db.repository import EntityStore
from src.game_testing.entities import EntityId, Game, Publisher, Tester
from src.game_testing.relationships import assign_tester, attach_game
from src.services.mapper import (
    copy_game_fields,
    game_to_record,
    publisher_to_record,
    record_to_game,
    record_to_publisher,
    record_to_tester,
    tester_to_record,
)

logger = logging.getLogger(__name__)


class GameTestingService:
    """
    Use cases of the game testing catalogue.

    Every public method runs inside one store transaction: if any step fails, none of its writes persist.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # --- Publishers ---
    def create_or_update_publisher(self, record: PublisherData) -> PublisherData:
        """
        Insert a publisher (no ID) or overwrite an existing one (ID given).

        ---
        Updates are full replacements of the publisher's own fields, not a patch:
        a field left out of the record is reset to its default. Games in the record are ignored.
        """
        publisher = record_to_publisher(record)
        with self.store.transaction():
            if publisher.id is None:
                stored = self.store.publishers.create_publisher(publisher)
                logger.info("Created publisher with ID=%s", stored.id)
            else:
                updated = self.store.publishers.update_publisher(publisher.id, publisher)
                if updated is None:
                    raise self._not_found("Publisher", publisher.id)
                stored = updated
                logger.info("Updated publisher with ID=%s", stored.id)
            return publisher_to_record(stored)

    def get_publisher(self, publisher_id: EntityId) -> PublisherData:
        with self.store.transaction():
            return publisher_to_record(self._fetch_publisher(publisher_id))

    def list_publishers(self) -> list[PublisherData]:
        """All publishers, sorted alphabetically by name."""
        with self.store.transaction():
            publishers = self.store.publishers.list_publishers()
        publishers.sort(key=lambda p: p.name or "")
        return [publisher_to_record(p) for p in publishers]

    def delete_publisher(self, publisher_id: EntityId) -> None:
        """Delete a publisher. Its games (and their tester associations) go with it."""
        with self.store.transaction():
            deleted = self.store.publishers.delete_publisher(publisher_id)
            if deleted is None:
                raise self._not_found("Publisher", publisher_id)
        logger.info(
            "Deleted publisher with ID=%s and %d owned game(s)",
            publisher_id,
            len(deleted.games),
        )

    # --- Games ---
    def add_or_update_game(
        self, publisher_id: EntityId, record: GameData
    ) -> GameData:
        """Create a game under a publisher, or update one the publisher already owns."""
        with self.store.transaction():
            publisher = self._fetch_publisher(publisher_id)
            game = self._find_or_create_game(publisher_id, record)

            # Only the descriptive fields come from the record: ID and testers stay as stored
            copy_game_fields(game, record)
            attach_game(publisher, game)

            if game.id is None:
                stored = self.store.games.create_game(game)
                logger.info(
                    "Created game with ID=%s for publisher with ID=%s (%d owned game(s))",
                    stored.id,
                    publisher_id,
                    len(publisher.games),
                )
            else:
                updated = self.store.games.update_game(game.id, game)
                if updated is None:
                    raise self._not_found("Game", game.id)
                stored = updated
                logger.info(
                    "Updated game with ID=%s for publisher with ID=%s (%d owned game(s))",
                    stored.id,
                    publisher_id,
                    len(publisher.games),
                )
            return game_to_record(stored)

    # --- Testers ---
    def get_tester(self, tester_id: EntityId) -> TesterData:
        with self.store.transaction():
            return tester_to_record(self._fetch_tester(tester_id))

    def create_tester(self, record: TesterData) -> TesterData:
        """Store a new tester. Game assignments happen through assign_tester_to_game only."""
        tester = record_to_tester(record)
        tester.id = None
        with self.store.transaction():
            stored = self.store.testers.create_tester(tester)
        logger.info("Created tester with ID=%s", stored.id)
        return tester_to_record(stored)

    def assign_tester_to_game(self, game_id: EntityId, tester_id: EntityId) -> GameData:
        """Associate a tester with a game. Assigning the same pair twice is a no-op."""
        with self.store.transaction():
            game = self._fetch_game(game_id)
            tester = self._fetch_tester(tester_id)

            if assign_tester(game, tester):
                logger.info("Assigned tester with ID=%s to game with ID=%s", tester_id, game_id)
            else:
                logger.info("Tester with ID=%s already assigned to game with ID=%s", tester_id, game_id)

            stored = self.store.games.update_game(game_id, game)
            if stored is None:
                raise self._not_found("Game", game_id)
            return game_to_record(stored)

    def list_testers_for_game(self, game_id: EntityId) -> list[TesterData]:
        with self.store.transaction():
            self._fetch_game(game_id)
            testers = self.store.testers.list_testers_for_game(game_id)
        return [tester_to_record(t) for t in testers]

    def list_games_for_tester(self, tester_id: EntityId) -> list[GameData]:
        """Inverse view of the association: every game the tester is assigned to."""
        with self.store.transaction():
            self._fetch_tester(tester_id)
            games = self.store.games.list_games_for_tester(tester_id)
        return [game_to_record(g) for g in games]

    # -- Internal helpers --
    def _fetch_publisher(self, publisher_id: EntityId) -> Publisher:
        publisher = self.store.publishers.get_publisher(publisher_id)
        if publisher is None:
            raise self._not_found("Publisher", publisher_id)
        return publisher

    def _fetch_game(self, game_id: EntityId) -> Game:
        game = self.store.games.get_game(game_id)
        if game is None:
            raise self._not_found("Game", game_id)
        return game

    def _fetch_tester(self, tester_id: EntityId) -> Tester:
        tester = self.store.testers.get_tester(tester_id)
        if tester is None:
            raise self._not_found("Tester", tester_id)
        return tester

    def _find_or_create_game(
        self, publisher_id: EntityId, record: GameData
    ) -> Game:
        """New game if the record has no ID, else the stored game, which must belong to the publisher."""
        game_id = record.id
        if game_id is None:
            return record_to_game(record)

        game = self._fetch_game(game_id)
        if game.publisher_id != publisher_id:
            logger.warning(
                "Game with ID=%s belongs to publisher ID=%s, not ID=%s",
                game_id,
                game.publisher_id,
                publisher_id,
            )
            raise OwnershipMismatchError(
                f"Game with ID={game_id} is not published by publisher with ID={publisher_id}."
            )
        return game

    @staticmethod
    def _not_found(kind: str, entity_id: EntityId) -> NotFoundError:
        logger.warning("%s with ID=%s was not found", kind, entity_id)
        return NotFoundError(f"{kind} with ID={entity_id} was not found.")
