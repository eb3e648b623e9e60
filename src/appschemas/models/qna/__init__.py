# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.models.base import QnaBase
from appschemas.models.qna.answer import Answer
from appschemas.models.qna.comment import Comment
from appschemas.models.qna.follow import TopicFollow, UserFollow
from appschemas.models.qna.like import Like
from appschemas.models.qna.question import Question
from appschemas.models.qna.topic import QuestionTopic, Topic
from appschemas.models.qna.user import User
from appschemas.schemas.qna import CommentParentKind, LikeTargetKind

metadata = QnaBase.metadata

__all__ = [
    "Answer",
    "Comment",
    "CommentParentKind",
    "Like",
    "LikeTargetKind",
    "QnaBase",
    "Question",
    "QuestionTopic",
    "Topic",
    "TopicFollow",
    "User",
    "UserFollow",
    "metadata",
]
