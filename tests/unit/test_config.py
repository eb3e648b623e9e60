# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import re

import pytest
from pydantic import ValidationError

from appschemas.config import Settings
from appschemas.services.references import new_booking_reference


class TestSettings:
    def test_database_url_per_schema(self) -> None:
        settings = Settings(
            qna_database_url="sqlite+aiosqlite:///q.db",
            movies_database_url="postgresql+asyncpg://localhost/movies",
        )
        assert settings.database_url("qna") == "sqlite+aiosqlite:///q.db"
        assert settings.database_url("movies").endswith("/movies")

    def test_unknown_schema(self) -> None:
        with pytest.raises(ValueError, match="unknown schema"):
            Settings().database_url("blog")

    def test_log_level_validated(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKING_REFERENCE_PREFIX", "MV")
        monkeypatch.setenv("MAX_THREAD_DEPTH", "7")
        settings = Settings()
        assert settings.booking_reference_prefix == "MV"
        assert settings.max_thread_depth == 7


class TestBookingReference:
    def test_format(self) -> None:
        reference = new_booking_reference("BK")
        assert re.fullmatch(r"BK\d{8}-[A-Z0-9]{8}", reference)

    def test_prefix_and_length(self) -> None:
        assert re.fullmatch(r"MV\d{8}-[A-Z0-9]{4}", new_booking_reference("MV", length=4))

    def test_references_differ(self) -> None:
        assert len({new_booking_reference() for _ in range(50)}) == 50
