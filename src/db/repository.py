"""Protocol repositories, one per entity, bundled by an EntityStore that supplies the transaction boundary."""

from contextlib import AbstractContextManager
from typing import Protocol

from src.game_testing.entities import EntityId, Game, Publisher, Tester


class PublisherRepository(Protocol):
    def get_publisher(self, publisher_id: EntityId) -> Publisher | None:
        """Get publisher (including its games) by ID, if record exists."""
        ...

    def list_publishers(self) -> list[Publisher]:
        """All stored publishers, in no particular order."""
        ...

    def create_publisher(self, publisher: Publisher) -> Publisher:
        """Store new publisher and return the stored data, with the newly assigned ID."""
        ...

    def update_publisher(
        self, publisher_id: EntityId, publisher: Publisher
    ) -> Publisher | None:
        """Overwrite all scalar fields of an existing record."""
        ...

    def delete_publisher(self, publisher_id: EntityId) -> Publisher | None:
        """Remove a publisher's record, together with the games it owns."""
        ...


class GameRepository(Protocol):
    def get_game(self, game_id: EntityId) -> Game | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: Game) -> Game:
        """Store new game and return the stored data, with the newly assigned ID."""
        ...

    def update_game(self, game_id: EntityId, game: Game) -> Game | None:
        """Overwrite an existing record, including its tester associations."""
        ...

    def list_games_for_tester(self, tester_id: EntityId) -> list[Game]:
        """Games associated with a tester (inverse view of Game.tester_ids)."""
        ...


class TesterRepository(Protocol):
    def get_tester(self, tester_id: EntityId) -> Tester | None:
        """Get tester by ID, if record exists."""
        ...

    def create_tester(self, tester: Tester) -> Tester:
        """Store new tester and return the stored data, with the newly assigned ID."""
        ...

    def list_testers_for_game(self, game_id: EntityId) -> list[Tester]:
        """Testers associated with a game."""
        ...


class EntityStore(Protocol):
    """Persistence layer orchestration."""

    publishers: PublisherRepository
    games: GameRepository
    testers: TesterRepository

    def transaction(self) -> AbstractContextManager[None]:
        """All-or-nothing scope: commit when the block exits cleanly, roll back on any exception."""
        ...
