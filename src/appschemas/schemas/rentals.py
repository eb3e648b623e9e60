# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


class StayRequest(BaseModel):
    property_id: PositiveInt
    guest_id: PositiveInt
    check_in_date: date
    check_out_date: date
    guests: PositiveInt
    special_requests: str | None = Field(None, max_length=10_000)

    @model_validator(mode="after")
    def _validate_dates(self) -> StayRequest:
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days


class PropertySearch(BaseModel):
    city_name: str
    min_guests: PositiveInt | None = None
    min_price: Decimal | None = Field(None, ge=0)
    max_price: Decimal | None = Field(None, ge=0)
    # Unrated listings always pass the rating filter.
    min_rating: float | None = Field(None, ge=1, le=5)
    limit: int = Field(50, ge=1, le=500)
    offset: int = Field(0, ge=0)


class PropertySearchResult(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    price_per_night: Decimal
    max_guests: int | None
    property_type: str
    city_name: str
    avg_rating: float | None
    review_count: int


class PropertyReviewCreate(BaseModel):
    booking_id: PositiveInt
    guest_id: PositiveInt
    overall_rating: int = Field(ge=1, le=5)
    cleanliness_rating: int | None = Field(None, ge=1, le=5)
    communication_rating: int | None = Field(None, ge=1, le=5)
    checkin_rating: int | None = Field(None, ge=1, le=5)
    accuracy_rating: int | None = Field(None, ge=1, le=5)
    location_rating: int | None = Field(None, ge=1, le=5)
    value_rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = Field(None, max_length=10_000)


class HostReviewCreate(BaseModel):
    booking_id: PositiveInt
    host_id: PositiveInt
    rating: int = Field(ge=1, le=5)
    comment: str | None = Field(None, max_length=10_000)


class HostStats(BaseModel):
    property_id: int
    title: str
    total_bookings: int
    avg_rating: float | None
    total_earnings: Decimal
