# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.errors import CheckViolationError, DuplicateError, RuleViolationError
from appschemas.models.qna import (
    Answer,
    Comment,
    Like,
    Question,
    Topic,
    TopicFollow,
    User,
    UserFollow,
)
from appschemas.repositories import UserRepository
from appschemas.repositories.qna import (
    AnswerRepository,
    CommentRepository,
    FollowRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
)
from appschemas.schemas.qna import CommentParent, LikeTarget
from tests.conftest import make_user


async def _user(session: AsyncSession, username: str | None = None) -> User:
    user = User(**make_user(username=username))
    session.add(user)
    await session.flush()
    return user


async def _question_with_answer(
    session: AsyncSession, asker: User, answerer: User
) -> tuple[Question, Answer]:
    question = await QuestionRepository(session).create(
        Question(user_id=asker.id, title="Why?", content="Because.")
    )
    answer = await AnswerRepository(session).create(
        Answer(question_id=question.id, user_id=answerer.id, content="42")
    )
    return question, answer


async def _count(session: AsyncSession, model: type) -> int:
    return (await session.execute(select(func.count(model.id)))).scalar_one()


class TestUsers:
    async def test_lookup_by_username_and_email(self, qna_session: AsyncSession) -> None:
        user = await _user(qna_session, "ada")
        repo = UserRepository(qna_session, User)
        assert (await repo.get_by_username("ada")).id == user.id
        assert (await repo.get_by_email("ada@example.com")).id == user.id
        assert await repo.get_by_username("nobody") is None

    async def test_duplicate_username(self, qna_session: AsyncSession) -> None:
        await _user(qna_session, "ada")
        repo = UserRepository(qna_session, User)
        with pytest.raises(DuplicateError) as excinfo:
            await repo.create(User(**make_user(username="ada", email="other@example.com")))
        assert excinfo.value.constraint == "uq_users_username"


class TestAnswers:
    async def test_answers_of_a_question(self, qna_session: AsyncSession) -> None:
        asker, answerer = await _user(qna_session), await _user(qna_session)
        question, first = await _question_with_answer(qna_session, asker, answerer)
        repo = AnswerRepository(qna_session)
        second = await repo.create(
            Answer(question_id=question.id, user_id=asker.id, content="Follow-up")
        )

        assert [a.id for a in await repo.list_by_question(question.id)] == [
            first.id,
            second.id,
        ]
        assert await repo.count_by_question(question.id) == 2
        assert await repo.list_by_question(question.id + 1) == []


class TestComments:
    async def test_thread_depths(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)

        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")
        reply = await repo.add(bob.id, CommentParent.comment(top.id), "reply")
        nested = await repo.add(alice.id, CommentParent.comment(reply.id), "nested")
        other = await repo.add(bob.id, CommentParent.answer(answer.id), "second top")

        thread = await repo.get_thread(answer.id)
        assert [(c.id, depth) for c, depth in thread] == [
            (top.id, 0),
            (other.id, 0),
            (reply.id, 1),
            (nested.id, 2),
        ]
        assert [c.id for c in await repo.list_replies(top.id)] == [reply.id]

    async def test_thread_depth_limit(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")
        reply = await repo.add(bob.id, CommentParent.comment(top.id), "reply")
        await repo.add(alice.id, CommentParent.comment(reply.id), "too deep")

        thread = await repo.get_thread(answer.id, max_depth=1)
        assert [depth for _, depth in thread] == [0, 1]

    async def test_comment_needs_exactly_one_parent(
        self, qna_session: AsyncSession
    ) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")

        with pytest.raises(CheckViolationError) as excinfo:
            await repo.create(
                Comment(
                    user_id=bob.id,
                    answer_id=answer.id,
                    parent_comment_id=top.id,
                    content="both",
                )
            )
        assert excinfo.value.constraint == "ck_comments_single_parent"

    async def test_comment_without_parent(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        with pytest.raises(CheckViolationError):
            await CommentRepository(qna_session).create(
                Comment(user_id=alice.id, content="floating")
            )

    async def test_comment_cannot_reply_to_itself(
        self, qna_session: AsyncSession
    ) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")
        reply = await repo.add(bob.id, CommentParent.comment(top.id), "reply")

        reply.parent_comment_id = reply.id
        with pytest.raises(CheckViolationError) as excinfo:
            await repo.flush()
        assert excinfo.value.constraint == "ck_comments_not_self_parent"

    async def test_set_parent_refuses_itself(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")

        with pytest.raises(CheckViolationError) as excinfo:
            await repo.set_parent(top.id, CommentParent.comment(top.id))
        assert excinfo.value.constraint == "ck_comments_not_self_parent"
        assert top.answer_id == answer.id

    async def test_set_parent_refuses_own_reply(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")
        reply = await repo.add(bob.id, CommentParent.comment(top.id), "reply")
        nested = await repo.add(alice.id, CommentParent.comment(reply.id), "nested")

        with pytest.raises(RuleViolationError):
            await repo.set_parent(top.id, CommentParent.comment(nested.id))
        assert top.parent_ref == CommentParent.answer(answer.id)

    async def test_set_parent_moves_subtree(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        first = await repo.add(alice.id, CommentParent.answer(answer.id), "first")
        second = await repo.add(bob.id, CommentParent.answer(answer.id), "second")
        reply = await repo.add(bob.id, CommentParent.comment(second.id), "reply")

        moved = await repo.set_parent(second.id, CommentParent.comment(first.id))
        assert moved.parent_ref == CommentParent.comment(first.id)

        thread = await repo.get_thread(answer.id)
        assert [(c.id, depth) for c, depth in thread] == [
            (first.id, 0),
            (second.id, 1),
            (reply.id, 2),
        ]

    async def test_deleting_answer_removes_whole_thread(
        self, qna_session: AsyncSession
    ) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        _, answer = await _question_with_answer(qna_session, alice, bob)
        repo = CommentRepository(qna_session)
        top = await repo.add(alice.id, CommentParent.answer(answer.id), "top")
        await repo.add(bob.id, CommentParent.comment(top.id), "reply")
        await LikeRepository(qna_session).like(bob.id, LikeTarget.comment(top.id))

        await qna_session.delete(answer)
        await qna_session.flush()
        assert await _count(qna_session, Comment) == 0
        assert await _count(qna_session, Like) == 0


class TestLikes:
    async def test_like_each_target_type_once(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        question, answer = await _question_with_answer(qna_session, alice, bob)
        repo = LikeRepository(qna_session)

        await repo.like(bob.id, LikeTarget.question(question.id))
        await repo.like(bob.id, LikeTarget.answer(answer.id))
        await repo.like(alice.id, LikeTarget.answer(answer.id))

        assert await repo.count(LikeTarget.answer(answer.id)) == 2
        assert await repo.count(LikeTarget.question(question.id)) == 1
        assert await repo.has_liked(bob.id, LikeTarget.question(question.id))
        assert not await repo.has_liked(alice.id, LikeTarget.question(question.id))

    async def test_duplicate_like(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        question, _ = await _question_with_answer(qna_session, alice, bob)
        repo = LikeRepository(qna_session)
        await repo.like(bob.id, LikeTarget.question(question.id))

        with pytest.raises(DuplicateError) as excinfo:
            await repo.like(bob.id, LikeTarget.question(question.id))
        assert excinfo.value.constraint == "uq_likes_user_id_question_id"

    async def test_like_without_target(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        with pytest.raises(CheckViolationError) as excinfo:
            await LikeRepository(qna_session).create(Like(user_id=alice.id))
        assert excinfo.value.constraint == "ck_likes_single_target"

    async def test_like_with_two_targets(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        question, answer = await _question_with_answer(qna_session, alice, bob)
        with pytest.raises(CheckViolationError):
            await LikeRepository(qna_session).create(
                Like(user_id=bob.id, question_id=question.id, answer_id=answer.id)
            )

    async def test_unlike(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        question, _ = await _question_with_answer(qna_session, alice, bob)
        repo = LikeRepository(qna_session)
        target = LikeTarget.question(question.id)
        await repo.like(bob.id, target)

        assert await repo.unlike(bob.id, target) is True
        assert await repo.unlike(bob.id, target) is False
        assert await repo.count(target) == 0


class TestFollowsAndFeeds:
    async def test_follow_edges(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session, "alice")
        bob = await _user(qna_session, "bob")
        carol = await _user(qna_session, "carol")
        repo = FollowRepository(qna_session)
        await repo.follow_user(bob.id, alice.id)
        await repo.follow_user(carol.id, alice.id)

        followers = await repo.list_followers(alice.id)
        assert [u.username for u in followers] == ["bob", "carol"]
        assert [u.id for u in await repo.list_following(bob.id)] == [alice.id]

        assert await repo.unfollow_user(bob.id, alice.id) is True
        assert await repo.unfollow_user(bob.id, alice.id) is False

    async def test_duplicate_follow(self, qna_session: AsyncSession) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        repo = FollowRepository(qna_session)
        await repo.follow_user(bob.id, alice.id)
        with pytest.raises(DuplicateError):
            await repo.follow_user(bob.id, alice.id)

    async def test_self_follow_rejected_by_database(
        self, qna_session: AsyncSession
    ) -> None:
        alice = await _user(qna_session)
        with pytest.raises(CheckViolationError) as excinfo:
            await FollowRepository(qna_session).create(
                UserFollow(follower_id=alice.id, following_id=alice.id)
            )
        assert excinfo.value.constraint == "ck_user_follows_no_self_follow"

    async def test_feed_from_followed_users(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        bob = await _user(qna_session)
        carol = await _user(qna_session)
        questions = QuestionRepository(qna_session)
        first = await questions.create(Question(user_id=bob.id, title="first"))
        second = await questions.create(Question(user_id=bob.id, title="second"))
        await questions.create(Question(user_id=carol.id, title="unfollowed"))
        await FollowRepository(qna_session).follow_user(alice.id, bob.id)

        feed = await questions.feed_from_followed_users(alice.id)
        assert {q.id for q in feed} == {first.id, second.id}

    async def test_topic_feed_lists_each_question_once(
        self, qna_session: AsyncSession
    ) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        python, sql = Topic(name="Python"), Topic(name="SQL")
        qna_session.add_all([python, sql])
        await qna_session.flush()

        questions = QuestionRepository(qna_session)
        question = await questions.create(Question(user_id=bob.id, title="ORMs?"))
        await questions.add_topic(question.id, python.id)
        await questions.add_topic(question.id, sql.id)

        follows = FollowRepository(qna_session)
        await follows.follow_topic(alice.id, python.id)
        await follows.follow_topic(alice.id, sql.id)

        feed = await questions.feed_from_followed_topics(alice.id)
        assert [q.id for q in feed] == [question.id]
        assert [t.name for t in await follows.list_followed_topics(alice.id)] == [
            "Python",
            "SQL",
        ]
        assert [q.id for q in await questions.list_by_topic_name("SQL")] == [
            question.id
        ]
        assert [t.name for t in await questions.list_topics(question.id)] == [
            "Python",
            "SQL",
        ]

    async def test_topic_follow_and_unfollow(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        topic = Topic(name="Haskell")
        qna_session.add(topic)
        await qna_session.flush()
        follows = FollowRepository(qna_session)
        await follows.follow_topic(alice.id, topic.id)

        assert await follows.unfollow_topic(alice.id, topic.id) is True
        assert await follows.unfollow_topic(alice.id, topic.id) is False
        assert await follows.list_followed_topics(alice.id) == []

    async def test_duplicate_topic_follow(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        topic = Topic(name="Elixir")
        qna_session.add(topic)
        await qna_session.flush()
        follows = FollowRepository(qna_session)
        await follows.follow_topic(alice.id, topic.id)

        with pytest.raises(DuplicateError) as excinfo:
            await follows.follow_topic(alice.id, topic.id)
        assert excinfo.value.constraint == "uq_topic_follows_user_id_topic_id"

    async def test_topic_assigned_once(self, qna_session: AsyncSession) -> None:
        alice = await _user(qna_session)
        topic = Topic(name="Go")
        qna_session.add(topic)
        await qna_session.flush()
        questions = QuestionRepository(qna_session)
        question = await questions.create(Question(user_id=alice.id, title="t"))
        await questions.add_topic(question.id, topic.id)
        with pytest.raises(DuplicateError):
            await questions.add_topic(question.id, topic.id)

    async def test_topic_lookup_and_unique_name(self, qna_session: AsyncSession) -> None:
        repo = TopicRepository(qna_session)
        topic = await repo.create(Topic(name="Rust"))
        assert (await repo.get_by_name("Rust")).id == topic.id
        with pytest.raises(DuplicateError) as excinfo:
            await repo.create(Topic(name="Rust"))
        assert excinfo.value.constraint == "uq_topics_name"


class TestCascades:
    async def test_deleting_user_removes_their_content(
        self, qna_session: AsyncSession
    ) -> None:
        alice, bob = await _user(qna_session), await _user(qna_session)
        question, answer = await _question_with_answer(qna_session, alice, bob)
        await CommentRepository(qna_session).add(
            alice.id, CommentParent.answer(answer.id), "thanks"
        )
        await LikeRepository(qna_session).like(alice.id, LikeTarget.answer(answer.id))
        follows = FollowRepository(qna_session)
        await follows.follow_user(alice.id, bob.id)
        topic = await TopicRepository(qna_session).create(Topic(name="Ocaml"))
        await follows.follow_topic(alice.id, topic.id)
        await follows.follow_topic(bob.id, topic.id)

        await qna_session.delete(alice)
        await qna_session.flush()

        # Alice's question took Bob's answer with it.
        assert await _count(qna_session, Question) == 0
        assert await _count(qna_session, Answer) == 0
        assert await _count(qna_session, Comment) == 0
        assert await _count(qna_session, Like) == 0
        assert await _count(qna_session, UserFollow) == 0
        assert await _count(qna_session, TopicFollow) == 1
        assert await _count(qna_session, User) == 1
