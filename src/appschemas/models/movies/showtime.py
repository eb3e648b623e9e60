# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, MoviesBase, table_args


class Showtime(IntegerIDMixin, CreatedAtMixin, MoviesBase):
    """One screening of a movie at a theatre.

    ``available_seats`` is a cached aggregate kept in step with bookings by
    :class:`~appschemas.services.seat_reservations.SeatReservationService`;
    no database constraint ties it to the bookings table.
    """

    __tablename__ = "showtimes"

    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )
    theatre_id: Mapped[int] = mapped_column(
        ForeignKey("theatres.id", ondelete="CASCADE"),
        nullable=False,
    )
    show_date: Mapped[date] = mapped_column(Date, nullable=False)
    show_time: Mapped[time] = mapped_column(Time, nullable=False)
    screen_number: Mapped[int | None] = mapped_column(Integer, default=None)
    total_seats: Mapped[int | None] = mapped_column(
        Integer, default=100, server_default="100"
    )
    available_seats: Mapped[int | None] = mapped_column(
        Integer, default=100, server_default="100"
    )
    ticket_price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), default=None
    )

    # Relationships
    movie: Mapped[Movie] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="showtimes",
    )
    theatre: Mapped[Theatre] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="showtimes",
    )
    bookings: Mapped[list[Booking]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="showtime",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        Index("idx_showtimes_movie_id", "movie_id"),
        Index("idx_showtimes_theatre_id", "theatre_id"),
        Index("idx_showtimes_date", "show_date"),
    )
