# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.config import get_settings
from appschemas.errors import CheckViolationError, RuleViolationError
from appschemas.models.qna import Comment
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.qna import CommentParent, CommentParentKind


class CommentRepository(BaseRepository[Comment]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Comment)

    async def add(self, user_id: int, parent: CommentParent, content: str) -> Comment:
        comment = Comment.for_parent(user_id, parent, content)
        return await self.create(comment)

    async def set_parent(self, comment_id: int, parent: CommentParent) -> Comment:
        """Re-attach a comment, with its replies, to another answer or comment.

        A comment may not become a reply to itself or to anything in its own
        subtree; either would detach the thread from every answer.
        """
        comment = await self.get_or_raise(comment_id)
        if parent.kind is CommentParentKind.COMMENT:
            await self._check_not_in_subtree(comment.id, parent.id)
        comment.attach_to(parent)
        await self.flush()
        return comment

    async def _check_not_in_subtree(self, comment_id: int, new_parent_id: int) -> None:
        if new_parent_id == comment_id:
            raise CheckViolationError(
                f"comment {comment_id} cannot reply to itself",
                "ck_comments_not_self_parent",
            )
        ancestor: int | None = new_parent_id
        for _ in range(get_settings().max_thread_depth):
            ancestor = await self.session.scalar(
                select(Comment.parent_comment_id).where(Comment.id == ancestor)
            )
            if ancestor is None:
                return
            if ancestor == comment_id:
                raise RuleViolationError(
                    f"comment {new_parent_id} is a reply under comment {comment_id}"
                )
        raise RuleViolationError(
            f"comment {new_parent_id} is nested deeper than the thread limit"
        )

    async def list_replies(self, comment_id: int) -> list[Comment]:
        result = await self.session.execute(
            select(Comment)
            .where(Comment.parent_comment_id == comment_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return list(result.scalars().all())

    async def get_thread(
        self, answer_id: int, *, max_depth: int | None = None
    ) -> list[tuple[Comment, int]]:
        """Every comment under an answer with its reply depth.

        Top-level comments have depth 0. Rows come back breadth-first:
        ordered by depth, then creation time.
        """
        if max_depth is None:
            max_depth = get_settings().max_thread_depth
        t = Comment.__table__

        # Anchor: comments attached directly to the answer
        anchor = select(t.c.id, literal_column("0").label("depth")).where(
            t.c.answer_id == answer_id
        )

        # Recursive CTE; the depth bound also stops a corrupted reply cycle
        thread_cte = anchor.cte(name="thread", recursive=True)
        recursive = (
            select(t.c.id, (thread_cte.c.depth + 1).label("depth"))
            .join(thread_cte, t.c.parent_comment_id == thread_cte.c.id)
            .where(thread_cte.c.depth < max_depth)
        )
        thread_cte = thread_cte.union_all(recursive)

        stmt = (
            select(Comment, thread_cte.c.depth)
            .join(thread_cte, Comment.id == thread_cte.c.id)
            .order_by(thread_cte.c.depth, Comment.created_at, Comment.id)
        )
        result = await self.session.execute(stmt)
        return [(comment, depth) for comment, depth in result.all()]
