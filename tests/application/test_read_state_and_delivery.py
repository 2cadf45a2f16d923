"""Tests for read-state transitions, unread counts and the delivery surface."""

from datetime import timedelta

import pytest

from christ_collective.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify_user,
)
from christ_collective.domain.entities import Notification, NotificationType
from christ_collective.domain.errors import ForbiddenError, NotFoundError
from christ_collective.infrastructure.repositories import NotificationRepository
from christ_collective.utils import now_in_app_timezone


@pytest.fixture()
def make_notification(session):
    def _make_notification(recipient, message="Hello", **kwargs):
        return notify_user(
            session,
            recipient_id=recipient.id,
            notification_type=NotificationType.INFO,
            target=message,
            **kwargs,
        )

    return _make_notification


def test_mark_all_read_clears_the_unread_count(session, make_user, make_notification):
    user = make_user()
    for index in range(3):
        make_notification(user, f"Message {index}")

    assert count_unread_notifications(session, user.id) == 3

    updated = mark_all_notifications_read(session, user.id)

    assert updated == 3
    assert count_unread_notifications(session, user.id) == 0
    assert all(n.is_read for n in list_notifications(session, user.id))
    assert mark_all_notifications_read(session, user.id) == 0


def test_mark_all_read_only_touches_the_recipient(session, make_user, make_notification):
    user = make_user()
    other = make_user()
    make_notification(user)
    make_notification(other)

    mark_all_notifications_read(session, user.id)

    assert count_unread_notifications(session, other.id) == 1


def test_mark_read_is_idempotent(session, make_user, make_notification):
    user = make_user()
    notification = make_notification(user)

    first = mark_notification_read(session, notification.id, requestor_id=user.id)
    second = mark_notification_read(session, notification.id, requestor_id=user.id)

    assert first.is_read is True
    assert second.is_read is True
    assert count_unread_notifications(session, user.id) == 0


def test_unread_count_matches_unread_list(session, make_user, make_notification):
    user = make_user()
    created = [make_notification(user, f"Message {index}") for index in range(5)]
    mark_notification_read(session, created[1].id, requestor_id=user.id)
    mark_notification_read(session, created[3].id, requestor_id=user.id)

    unread = list_notifications(session, user.id, limit=None, unread_only=True)

    assert count_unread_notifications(session, user.id) == len(unread) == 3


@pytest.mark.parametrize("operation", ["mark_read", "delete"])
def test_only_the_recipient_may_change_a_notification(
    session, make_user, make_notification, operation
):
    owner = make_user()
    intruder = make_user()
    notification = make_notification(owner)

    with pytest.raises(ForbiddenError):
        if operation == "mark_read":
            mark_notification_read(session, notification.id, requestor_id=intruder.id)
        else:
            delete_notification(session, notification.id, requestor_id=intruder.id)

    (stored,) = list_notifications(session, owner.id)
    assert stored.is_read is False


def test_missing_notification_raises_not_found(session, make_user):
    user = make_user()

    with pytest.raises(NotFoundError):
        mark_notification_read(session, 404, requestor_id=user.id)
    with pytest.raises(NotFoundError):
        delete_notification(session, 404, requestor_id=user.id)


def test_deleting_a_read_notification_keeps_the_unread_count(
    session, make_user, make_notification
):
    user = make_user()
    read = make_notification(user, "Old news")
    make_notification(user, "Fresh news")
    mark_notification_read(session, read.id, requestor_id=user.id)

    delete_notification(session, read.id, requestor_id=user.id)

    remaining = list_notifications(session, user.id)
    assert [n.message for n in remaining] == ["Fresh news"]
    assert count_unread_notifications(session, user.id) == 1

    with pytest.raises(NotFoundError):
        delete_notification(session, read.id, requestor_id=user.id)


def test_list_is_newest_first_and_pages_are_restartable(session, make_user):
    user = make_user()
    repository = NotificationRepository(session)
    base = now_in_app_timezone()
    for index in range(7):
        repository.create(
            Notification(
                id=None,
                recipient_id=user.id,
                type=NotificationType.INFO,
                title="Notification",
                message=f"Message {index}",
                created_at=base + timedelta(minutes=index),
            )
        )

    first_page = list_notifications(session, user.id, limit=3)
    second_page = list_notifications(session, user.id, skip=3, limit=3)
    again = list_notifications(session, user.id, skip=3, limit=3)
    last_page = list_notifications(session, user.id, skip=6, limit=3)

    assert [n.message for n in first_page] == ["Message 6", "Message 5", "Message 4"]
    assert [n.id for n in second_page] == [n.id for n in again]
    assert [n.message for n in last_page] == ["Message 0"]


def test_ties_on_created_at_are_broken_by_id(session, make_user):
    user = make_user()
    repository = NotificationRepository(session)
    moment = now_in_app_timezone()
    created = [
        repository.create(
            Notification(
                id=None,
                recipient_id=user.id,
                type=NotificationType.INFO,
                title="Notification",
                message=f"Message {index}",
                created_at=moment,
            )
        )
        for index in range(3)
    ]

    listed = list_notifications(session, user.id)

    assert [n.id for n in listed] == [n.id for n in reversed(created)]


@pytest.mark.parametrize(("skip", "limit"), [(-1, 10), (0, 0)])
def test_invalid_pagination_is_rejected(session, make_user, skip, limit):
    user = make_user()

    with pytest.raises(ValueError):
        list_notifications(session, user.id, skip=skip, limit=limit)


def test_notifying_a_missing_user_fails(session):
    with pytest.raises(NotFoundError):
        notify_user(
            session,
            recipient_id=999,
            notification_type=NotificationType.INFO,
            target="Nobody home",
        )
