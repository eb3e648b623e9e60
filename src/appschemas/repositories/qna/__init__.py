# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.repositories.qna.answer_repository import AnswerRepository
from appschemas.repositories.qna.comment_repository import CommentRepository
from appschemas.repositories.qna.follow_repository import FollowRepository
from appschemas.repositories.qna.like_repository import LikeRepository
from appschemas.repositories.qna.question_repository import QuestionRepository
from appschemas.repositories.qna.topic_repository import TopicRepository

__all__ = [
    "AnswerRepository",
    "CommentRepository",
    "FollowRepository",
    "LikeRepository",
    "QuestionRepository",
    "TopicRepository",
]
