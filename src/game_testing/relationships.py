"""
Maintenance of the two entity relationships.

Callers go through these functions instead of touching ``Publisher.games`` or ``Game.tester_ids`` directly,
so that both ends of a relationship always agree.
"""

from src.game_testing.entities import Game, Publisher, Tester


def _same_game(first: Game, second: Game) -> bool:
    if first is second:
        return True
    return first.id is not None and first.id == second.id


def attach_game(publisher: Publisher, game: Game) -> None:
    """
    Make the publisher the owner of the game. Attaching the same game again changes nothing.

    ---
    Keeps the loaded publisher aggregate consistent for the rest of the operation.
    Stores persist ownership from ``game.publisher_id`` and rebuild ``Publisher.games`` from it on the next load.
    """
    game.publisher_id = publisher.id
    if not any(_same_game(owned, game) for owned in publisher.games):
        publisher.games.append(game)


def assign_tester(game: Game, tester: Tester) -> bool:
    """
    Associate a tester with a game.

    Returns False if the tester was already assigned (association is a set).
    ---
    The tester's view of its games is derived from the same association, so no second write is needed.
    """
    if tester.id is None:
        raise ValueError("Cannot assign a tester that has not been persisted yet.")
    if tester.id in game.tester_ids:
        return False
    game.tester_ids.add(tester.id)
    return True
