#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors
"""Print the CREATE TABLE / CREATE INDEX statements for a schema.

Usage:
    python scripts/print_ddl.py --schema rentals
    python scripts/print_ddl.py --schema qna --dialect sqlite
"""

from __future__ import annotations

import argparse

from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

from appschemas.models import SCHEMAS

DIALECTS = {
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
    "mysql": mysql.dialect,
}


def render(schema: str, dialect_name: str) -> str:
    dialect = DIALECTS[dialect_name]()
    statements: list[str] = []
    for table in SCHEMAS[schema].sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip())
        for index in sorted(table.indexes, key=lambda ix: ix.name or ""):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip())
    return ";\n\n".join(statements) + ";\n"


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print DDL for one schema")
    parser.add_argument("--schema", choices=sorted(SCHEMAS), required=True)
    parser.add_argument(
        "--dialect",
        choices=sorted(DIALECTS),
        default="postgresql",
        help="SQL dialect to compile for (default: postgresql)",
    )
    args = parser.parse_args()
    print(render(args.schema, args.dialect))
