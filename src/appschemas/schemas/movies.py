# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from pydantic import BaseModel, Field, PositiveInt


class SeatRequest(BaseModel):
    user_id: PositiveInt
    showtime_id: PositiveInt
    seats: PositiveInt


class ReviewCreate(BaseModel):
    user_id: PositiveInt
    rating: int = Field(ge=1, le=10)
    comment: str | None = Field(None, max_length=10_000)


class RatingSummary(BaseModel):
    average_rating: float | None
    total_reviews: int
