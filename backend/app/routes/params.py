"""
CodeMate Backend — Shared Route Parameters
============================================

Row ids are int4 on PostgreSQL. Anything outside 1..MAX_ROW_ID can never
match a row, so it is rejected with 422 before a query is issued.
"""

from typing import Annotated

from fastapi import Path, Query

from app.schemas.common import MAX_ROW_ID

PathId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]

ActingUserId = Annotated[
    int,
    Query(ge=1, le=MAX_ROW_ID, description="Acting user; must own the resource"),
]
