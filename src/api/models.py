"""Transfer records exchanged with API clients (request bodies and responses)"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.exceptions import InvalidRequestError

RecordId = int


class Record(BaseModel):
    """Common base: the ID is absent before the store assigns one, and a positive integer afterwards."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[RecordId] = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: Optional[RecordId]) -> Optional[RecordId]:
        if value is not None and value <= 0:
            raise InvalidRequestError(f"ID must be a positive integer, got {value!r}.")
        return value


class GameData(Record):
    """A game as seen by clients. Testers are listed by ID only, so the record never nests back into a game."""

    name: Optional[str] = None
    genre: Optional[str] = None
    platforms: Optional[str] = None
    tester_ids: list[RecordId] = Field(default_factory=list, alias="testerIds")


class PublisherData(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    rating: float = 0.0
    games: list[GameData] = Field(default_factory=list)


class TesterData(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
