# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Q&A schema: users, questions, answers, threaded comments, likes, follows.

Revision ID: qna_001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "qna_001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = ("qna",)
depends_on: tuple[str, ...] | None = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=True,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def _fk(owner: str, column: str, table: str, *, nullable: bool = False) -> sa.Column:
    return sa.Column(
        column,
        sa.Integer(),
        sa.ForeignKey(
            f"{table}.id",
            ondelete="CASCADE",
            name=f"fk_{owner}_{column}_{table}",
        ),
        nullable=nullable,
    )


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. users
    # ------------------------------------------------------------------
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(100), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 2. topics
    # ------------------------------------------------------------------
    op.create_table(
        "topics",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_topics"),
        sa.UniqueConstraint("name", name="uq_topics_name"),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 3. questions, answers
    # ------------------------------------------------------------------
    op.create_table(
        "questions",
        _id(),
        _fk("questions", "user_id", "users"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_questions"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_questions_user_id", "questions", ["user_id"])

    op.create_table(
        "answers",
        _id(),
        _fk("answers", "question_id", "questions"),
        _fk("answers", "user_id", "users"),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_answers"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_user_id", "answers", ["user_id"])

    # ------------------------------------------------------------------
    # 4. comments (on an answer, or a reply to another comment)
    # ------------------------------------------------------------------
    op.create_table(
        "comments",
        _id(),
        _fk("comments", "user_id", "users"),
        _fk("comments", "answer_id", "answers", nullable=True),
        _fk("comments", "parent_comment_id", "comments", nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_comments"),
        sa.CheckConstraint(
            "(answer_id IS NOT NULL AND parent_comment_id IS NULL)"
            " OR (answer_id IS NULL AND parent_comment_id IS NOT NULL)",
            name="ck_comments_single_parent",
        ),
        # MySQL refuses CHECKs that read an AUTO_INCREMENT column.
        sa.CheckConstraint(
            "parent_comment_id IS NULL OR parent_comment_id != id",
            name="ck_comments_not_self_parent",
        ).ddl_if(dialect=("postgresql", "sqlite")),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_comments_answer_id", "comments", ["answer_id"])
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_user_id", "comments", ["user_id"])

    # ------------------------------------------------------------------
    # 5. likes (exactly one target)
    # ------------------------------------------------------------------
    op.create_table(
        "likes",
        _id(),
        _fk("likes", "user_id", "users"),
        _fk("likes", "question_id", "questions", nullable=True),
        _fk("likes", "answer_id", "answers", nullable=True),
        _fk("likes", "comment_id", "comments", nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_likes"),
        sa.CheckConstraint(
            "(question_id IS NOT NULL AND answer_id IS NULL AND comment_id IS NULL)"
            " OR (question_id IS NULL AND answer_id IS NOT NULL AND comment_id IS NULL)"
            " OR (question_id IS NULL AND answer_id IS NULL AND comment_id IS NOT NULL)",
            name="ck_likes_single_target",
        ),
        sa.UniqueConstraint(
            "user_id", "question_id", name="uq_likes_user_id_question_id"
        ),
        sa.UniqueConstraint("user_id", "answer_id", name="uq_likes_user_id_answer_id"),
        sa.UniqueConstraint(
            "user_id", "comment_id", name="uq_likes_user_id_comment_id"
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_likes_question_id", "likes", ["question_id"])
    op.create_index("idx_likes_answer_id", "likes", ["answer_id"])
    op.create_index("idx_likes_comment_id", "likes", ["comment_id"])

    # ------------------------------------------------------------------
    # 6. question_topics, follows
    # ------------------------------------------------------------------
    op.create_table(
        "question_topics",
        _id(),
        _fk("question_topics", "question_id", "questions"),
        _fk("question_topics", "topic_id", "topics"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_question_topics"),
        sa.UniqueConstraint(
            "question_id",
            "topic_id",
            name="uq_question_topics_question_id_topic_id",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_question_topics_topic_id", "question_topics", ["topic_id"])

    op.create_table(
        "user_follows",
        _id(),
        _fk("user_follows", "follower_id", "users"),
        _fk("user_follows", "following_id", "users"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_user_follows"),
        sa.CheckConstraint(
            "follower_id != following_id", name="ck_user_follows_no_self_follow"
        ),
        sa.UniqueConstraint(
            "follower_id",
            "following_id",
            name="uq_user_follows_follower_id_following_id",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_user_follows_following_id", "user_follows", ["following_id"])

    op.create_table(
        "topic_follows",
        _id(),
        _fk("topic_follows", "user_id", "users"),
        _fk("topic_follows", "topic_id", "topics"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_topic_follows"),
        sa.UniqueConstraint(
            "user_id", "topic_id", name="uq_topic_follows_user_id_topic_id"
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_topic_follows_topic_id", "topic_follows", ["topic_id"])


def downgrade() -> None:
    op.drop_table("topic_follows")
    op.drop_table("user_follows")
    op.drop_table("question_topics")
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("topics")
    op.drop_table("users")
