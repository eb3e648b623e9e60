# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone

_ALPHABET = string.ascii_uppercase + string.digits


def new_booking_reference(prefix: str = "BK", *, length: int = 8) -> str:
    """Return a booking code such as ``BK20261019-7Q2M9XKA``.

    The date part keeps codes roughly sortable; the random tail makes a
    collision with the unique column negligible.
    """
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d")
    tail = "".join(secrets.choice(_ALPHABET) for _ in range(length))
    return f"{prefix}{stamp}-{tail}"
