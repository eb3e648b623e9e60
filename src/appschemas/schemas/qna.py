# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, PositiveInt


class LikeTargetKind(str, enum.Enum):
    QUESTION = "question"
    ANSWER = "answer"
    COMMENT = "comment"

    @property
    def column(self) -> str:
        return f"{self.value}_id"


class CommentParentKind(str, enum.Enum):
    ANSWER = "answer"
    COMMENT = "comment"


class LikeTarget(BaseModel):
    """The single question, answer or comment a like points at."""

    model_config = ConfigDict(frozen=True)

    kind: LikeTargetKind
    id: PositiveInt

    @classmethod
    def question(cls, question_id: int) -> LikeTarget:
        return cls(kind=LikeTargetKind.QUESTION, id=question_id)

    @classmethod
    def answer(cls, answer_id: int) -> LikeTarget:
        return cls(kind=LikeTargetKind.ANSWER, id=answer_id)

    @classmethod
    def comment(cls, comment_id: int) -> LikeTarget:
        return cls(kind=LikeTargetKind.COMMENT, id=comment_id)


class CommentParent(BaseModel):
    """What a comment hangs off: an answer (top level) or another comment."""

    model_config = ConfigDict(frozen=True)

    kind: CommentParentKind
    id: PositiveInt

    @classmethod
    def answer(cls, answer_id: int) -> CommentParent:
        return cls(kind=CommentParentKind.ANSWER, id=answer_id)

    @classmethod
    def comment(cls, comment_id: int) -> CommentParent:
        return cls(kind=CommentParentKind.COMMENT, id=comment_id)
