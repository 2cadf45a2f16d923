"""Tests for resolving the authenticated user from a bearer token."""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi import HTTPException

from christ_collective.infrastructure.repositories import UserRepository
from christ_collective.infrastructure.security import create_access_token
from christ_collective.interfaces.api.dependencies import (
    get_current_active_user,
    password_signature,
    resolve_current_user,
)


def _token_for(user, **overrides) -> str:
    claims = {"sub": user.email, "pwd_sig": password_signature(user), **overrides}
    return create_access_token(data=claims)


def test_valid_token_resolves_the_user(session, make_user) -> None:
    user = make_user()

    resolved = resolve_current_user(_token_for(user), session)

    assert resolved.id == user.id


def test_password_change_invalidates_tokens(session, make_user) -> None:
    user = make_user()
    token = _token_for(user)
    UserRepository(session).update(replace(user, password="another-hash"))

    with pytest.raises(HTTPException) as exc_info:
        resolve_current_user(token, session)

    assert exc_info.value.status_code == 401


@pytest.mark.parametrize(
    "overrides",
    [{"sub": "ghost@example.com"}, {"pwd_sig": None}],
)
def test_unknown_subject_or_missing_signature_is_rejected(session, make_user, overrides) -> None:
    user = make_user()

    with pytest.raises(HTTPException) as exc_info:
        resolve_current_user(_token_for(user, **overrides), session)

    assert exc_info.value.status_code == 401


def test_expired_token_is_rejected(session, make_user) -> None:
    user = make_user()
    token = create_access_token(
        data={"sub": user.email, "pwd_sig": password_signature(user)},
        expires_delta=timedelta(minutes=-1),
    )

    with pytest.raises(HTTPException):
        resolve_current_user(token, session)


def test_inactive_user_is_rejected(make_user) -> None:
    user = make_user(is_active=False)

    with pytest.raises(HTTPException) as exc_info:
        get_current_active_user(user)

    assert exc_info.value.status_code == 400
