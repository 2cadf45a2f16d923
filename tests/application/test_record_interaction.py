"""Tests for recording interactions in the ledger."""

import pytest

from christ_collective.application.use_cases.interactions import (
    record_interaction,
    remove_interaction,
    should_notify,
)
from christ_collective.domain.entities import (
    ActionType,
    Interaction,
    Post,
    RelatedType,
    build_dedupe_key,
)
from christ_collective.domain.errors import ConflictError, ForbiddenError, NotFoundError
from christ_collective.infrastructure.database import SessionLocal
from christ_collective.infrastructure.repositories import (
    InteractionRepository,
    PostRepository,
)
from christ_collective.utils import now_in_app_timezone


@pytest.mark.parametrize(
    ("actor_id", "target_owner_id", "expected"),
    [(1, 1, False), (1, 2, True), (2, 1, True)],
)
def test_should_notify(actor_id, target_owner_id, expected):
    assert should_notify(actor_id, target_owner_id) is expected


def test_record_resolves_post_author_as_target_owner(session, make_user, make_post):
    author = make_user("Anna")
    reader = make_user("Ben")
    post = make_post(author)

    recorded = record_interaction(
        session,
        actor_id=reader.id,
        action_type="like",
        related_id=post.id,
        related_type="post",
    )

    assert recorded.created is True
    assert recorded.interaction.target_owner_id == author.id
    assert recorded.interaction.dedupe_key == f"{reader.id}:like:post:{post.id}"
    assert InteractionRepository(session).get(recorded.interaction.id) == recorded.interaction


def test_self_action_is_still_recorded(session, make_user, make_post):
    author = make_user()
    post = make_post(author)

    recorded = record_interaction(
        session,
        actor_id=author.id,
        action_type=ActionType.LIKE,
        related_id=post.id,
        related_type=RelatedType.POST,
    )

    assert recorded.created is True
    assert recorded.interaction.is_self_action


def test_record_twice_keeps_one_idempotent_interaction(session, make_user, make_post):
    author = make_user()
    reader = make_user()
    post = make_post(author)
    kwargs = dict(
        actor_id=reader.id,
        action_type=ActionType.LIKE,
        related_id=post.id,
        related_type=RelatedType.POST,
    )

    first = record_interaction(session, **kwargs)
    second = record_interaction(session, **kwargs)

    assert second.created is False
    assert second.interaction.id == first.interaction.id
    repository = InteractionRepository(session)
    assert repository.count_for_related(RelatedType.POST, post.id, ActionType.LIKE) == 1


def test_comments_are_never_deduplicated(session, make_user, make_post):
    author = make_user()
    reader = make_user()
    post = make_post(author)

    for text in ("Amen", "Amen"):
        record_interaction(
            session,
            actor_id=reader.id,
            action_type=ActionType.COMMENT,
            related_id=post.id,
            related_type=RelatedType.POST,
            body=text,
        )

    repository = InteractionRepository(session)
    assert repository.count_for_related(RelatedType.POST, post.id, ActionType.COMMENT) == 2


def test_repository_reports_duplicate_key_as_conflict(session, make_user, make_post):
    author = make_user()
    reader = make_user()
    post = make_post(author)
    dedupe_key = build_dedupe_key(reader.id, ActionType.LIKE, RelatedType.POST, post.id)

    def _like() -> Interaction:
        return Interaction(
            id=None,
            actor_id=reader.id,
            target_owner_id=author.id,
            action_type=ActionType.LIKE,
            related_id=post.id,
            related_type=RelatedType.POST,
            occurred_at=now_in_app_timezone(),
            dedupe_key=dedupe_key,
        )

    repository = InteractionRepository(session)
    repository.create(_like())

    with pytest.raises(ConflictError) as exc_info:
        repository.create(_like())

    assert exc_info.value.dedupe_key == dedupe_key


def test_duplicate_insert_keeps_the_callers_pending_work(session, make_user, make_post):
    author = make_user()
    reader = make_user()
    post = make_post(author)
    dedupe_key = build_dedupe_key(reader.id, ActionType.LIKE, RelatedType.POST, post.id)

    def _like() -> Interaction:
        return Interaction(
            id=None,
            actor_id=reader.id,
            target_owner_id=author.id,
            action_type=ActionType.LIKE,
            related_id=post.id,
            related_type=RelatedType.POST,
            occurred_at=now_in_app_timezone(),
            dedupe_key=dedupe_key,
        )

    repository = InteractionRepository(session)
    repository.create(_like())
    pending = PostRepository(session).create(
        Post(id=None, user_id=author.id, title="Draft", content="..."), commit=False
    )

    with pytest.raises(ConflictError):
        repository.create(_like(), commit=False)
    session.commit()

    with SessionLocal() as fresh:
        assert PostRepository(fresh).get(pending.id) is not None
        assert repository.count_for_related(RelatedType.POST, post.id, ActionType.LIKE) == 1


@pytest.mark.parametrize(
    ("action_type", "related_type"),
    [
        (ActionType.LIKE, RelatedType.CAMPAIGN),
        (ActionType.MESSAGE, RelatedType.POST),
        (ActionType.RSVP, RelatedType.MINISTRY),
    ],
)
def test_invalid_target_type_is_rejected(session, make_user, action_type, related_type):
    actor = make_user()

    with pytest.raises(NotFoundError):
        record_interaction(
            session,
            actor_id=actor.id,
            action_type=action_type,
            related_id=1,
            related_type=related_type,
        )


def test_explicit_owner_is_only_accepted_for_broadcasts(session, make_user, make_post):
    author = make_user()
    other = make_user()
    post = make_post(author)

    with pytest.raises(ValueError):
        record_interaction(
            session,
            actor_id=other.id,
            action_type=ActionType.LIKE,
            related_id=post.id,
            related_type=RelatedType.POST,
            target_owner_id=author.id,
        )


def test_missing_entities_raise_not_found(session, make_user):
    actor = make_user()

    with pytest.raises(NotFoundError):
        record_interaction(
            session,
            actor_id=actor.id,
            action_type=ActionType.LIKE,
            related_id=999,
            related_type=RelatedType.POST,
        )
    with pytest.raises(NotFoundError):
        record_interaction(
            session,
            actor_id=999,
            action_type=ActionType.FOLLOW,
            related_id=actor.id,
            related_type=RelatedType.USER,
        )


def test_inactive_actor_cannot_interact(session, make_user):
    target = make_user()
    inactive = make_user(is_active=False)

    with pytest.raises(NotFoundError):
        record_interaction(
            session,
            actor_id=inactive.id,
            action_type=ActionType.FOLLOW,
            related_id=target.id,
            related_type=RelatedType.USER,
        )


def test_message_to_foreign_chat_is_forbidden(session, make_user, make_chat):
    first = make_user()
    second = make_user()
    outsider = make_user()
    chat = make_chat(first, second)

    with pytest.raises(ForbiddenError):
        record_interaction(
            session,
            actor_id=outsider.id,
            action_type=ActionType.MESSAGE,
            related_id=chat.id,
            related_type=RelatedType.CHAT,
            body="hi",
        )


def test_message_targets_the_other_participant(session, make_user, make_chat):
    first = make_user()
    second = make_user()
    chat = make_chat(second, first)

    recorded = record_interaction(
        session,
        actor_id=second.id,
        action_type=ActionType.MESSAGE,
        related_id=chat.id,
        related_type=RelatedType.CHAT,
        body="hi",
    )

    assert recorded.interaction.target_owner_id == first.id


def test_remove_interaction(session, make_user, make_ministry):
    owner = make_user()
    follower = make_user()
    ministry = make_ministry(owner)
    kwargs = dict(
        actor_id=follower.id,
        action_type=ActionType.FOLLOW,
        related_id=ministry.id,
        related_type=RelatedType.MINISTRY,
    )
    record_interaction(session, **kwargs)

    assert remove_interaction(session, **kwargs) is True
    assert remove_interaction(session, **kwargs) is False


def test_remove_rejects_non_idempotent_actions(session, make_user):
    actor = make_user()

    with pytest.raises(ValueError):
        remove_interaction(
            session,
            actor_id=actor.id,
            action_type=ActionType.COMMENT,
            related_id=1,
            related_type=RelatedType.POST,
        )
