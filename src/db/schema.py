"""Database tables / schema"""

from typing import Optional

from sqlalchemy import Column, ForeignKey, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


# Single source of truth for the Game <-> Tester association.
game_tester = Table(
    "game_tester",
    Base.metadata,
    Column(
        "game_id",
        ForeignKey("game.game_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tester_id",
        ForeignKey("tester.tester_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class DBPublisher(Base):
    __tablename__ = "publisher"
    id: Mapped[int] = mapped_column("publisher_id", primary_key=True)
    name: Mapped[Optional[str]]
    email: Mapped[Optional[str]]
    phone: Mapped[Optional[str]]
    location: Mapped[Optional[str]]
    rating: Mapped[float] = mapped_column(default=0.0)
    games: Mapped[list["DBGame"]] = relationship(
        back_populates="publisher",
        cascade="all, delete-orphan",
        order_by="DBGame.id",
    )


class DBGame(Base):
    __tablename__ = "game"
    id: Mapped[int] = mapped_column("game_id", primary_key=True)
    name: Mapped[Optional[str]]
    genre: Mapped[Optional[str]]
    platforms: Mapped[Optional[str]]
    publisher_id: Mapped[int] = mapped_column(
        ForeignKey("publisher.publisher_id", ondelete="CASCADE")
    )
    publisher: Mapped[DBPublisher] = relationship(back_populates="games")
    # Owning side only. Tester -> games is a query: SQLGameRepository.list_games_for_tester
    testers: Mapped[set["DBTester"]] = relationship(secondary=game_tester)


class DBTester(Base):
    __tablename__ = "tester"
    id: Mapped[int] = mapped_column("tester_id", primary_key=True)
    name: Mapped[Optional[str]]
    email: Mapped[Optional[str]]
    phone: Mapped[Optional[str]]
