"""HTTP routes. Each handler logs the call and delegates to GameTestingService."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from src.api.models import GameData, MessageResponse, PublisherData, TesterData
from src.db.database import get_db
from src.db.sql_repository import SQLStore
from src.services.testing_service import GameTestingService

logger = logging.getLogger(__name__)

router = APIRouter()

PositiveId = Annotated[int, Path(gt=0)]


def get_service(db: Annotated[Session, Depends(get_db)]) -> GameTestingService:
    return GameTestingService(SQLStore(db))


Service = Annotated[GameTestingService, Depends(get_service)]


# --- Publishers ---
@router.post(
    "/publisher", response_model=PublisherData, status_code=status.HTTP_201_CREATED
)
def create_publisher(publisher: PublisherData, service: Service) -> PublisherData:
    logger.info("Creating publisher %s", publisher)
    return service.create_or_update_publisher(publisher.model_copy(update={"id": None}))


@router.put("/publisher/{publisher_id}", response_model=PublisherData)
def update_publisher(
    publisher_id: PositiveId, publisher: PublisherData, service: Service
) -> PublisherData:
    """Full overwrite of the publisher at the path ID. A body ID is replaced by it, but must still be a valid (positive) ID."""
    logger.info("Updating publisher with ID=%s: %s", publisher_id, publisher)
    return service.create_or_update_publisher(
        publisher.model_copy(update={"id": publisher_id})
    )


@router.get("/publisher/{publisher_id}", response_model=PublisherData)
def retrieve_publisher(publisher_id: PositiveId, service: Service) -> PublisherData:
    logger.info("Retrieving publisher with ID=%s", publisher_id)
    return service.get_publisher(publisher_id)


@router.get("/publisher", response_model=list[PublisherData])
def retrieve_all_publishers(service: Service) -> list[PublisherData]:
    logger.info("Retrieving all publishers")
    return service.list_publishers()


@router.delete("/publisher/{publisher_id}", response_model=MessageResponse)
def delete_publisher(publisher_id: PositiveId, service: Service) -> MessageResponse:
    logger.info("Deleting publisher with ID=%s", publisher_id)
    service.delete_publisher(publisher_id)
    return MessageResponse(
        message=f"Publisher with ID={publisher_id} was deleted successfully."
    )


# --- Games ---
@router.post(
    "/{publisher_id}/game", response_model=GameData, status_code=status.HTTP_201_CREATED
)
def add_game(publisher_id: PositiveId, game: GameData, service: Service) -> GameData:
    logger.info("Adding game %s to publisher with ID=%s", game, publisher_id)
    return service.add_or_update_game(publisher_id, game)


@router.post("/game/{game_id}/tester/{tester_id}", response_model=GameData)
def add_tester_to_game(
    game_id: PositiveId, tester_id: PositiveId, service: Service
) -> GameData:
    logger.info("Assigning tester with ID=%s to game with ID=%s", tester_id, game_id)
    return service.assign_tester_to_game(game_id, tester_id)


@router.get("/game/{game_id}/testers", response_model=list[TesterData])
def retrieve_testers_by_game_id(
    game_id: PositiveId, service: Service
) -> list[TesterData]:
    logger.info("Retrieving testers for game with ID=%s", game_id)
    return service.list_testers_for_game(game_id)


# --- Testers ---
@router.post("/tester", response_model=TesterData, status_code=status.HTTP_201_CREATED)
def create_tester(tester: TesterData, service: Service) -> TesterData:
    logger.info("Creating tester %s", tester)
    return service.create_tester(tester)


@router.get("/tester/{tester_id}", response_model=TesterData)
def retrieve_tester(tester_id: PositiveId, service: Service) -> TesterData:
    logger.info("Retrieving tester with ID=%s", tester_id)
    return service.get_tester(tester_id)


@router.get("/tester/{tester_id}/games", response_model=list[GameData])
def retrieve_games_by_tester_id(
    tester_id: PositiveId, service: Service
) -> list[GameData]:
    logger.info("Retrieving games for tester with ID=%s", tester_id)
    return service.list_games_for_tester(tester_id)
