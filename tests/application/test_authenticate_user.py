"""Tests for the credential check behind the token endpoint."""

import pytest

from christ_collective.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
)


@pytest.fixture()
def registered(session):
    return create_user(session, name="Anna", email="anna@example.com", password="Secret123")


def test_valid_credentials_return_the_user(session, registered):
    result = authenticate_user(session, "anna@example.com", "Secret123")

    assert result.status is AuthenticationStatus.SUCCESS
    assert result.user.id == registered.id


@pytest.mark.parametrize(
    ("email", "password"),
    [("anna@example.com", "wrong"), ("nobody@example.com", "Secret123")],
)
def test_bad_credentials_do_not_reveal_the_account(session, registered, email, password):
    result = authenticate_user(session, email, password)

    assert result.status is AuthenticationStatus.INVALID_CREDENTIALS
    assert result.user is None
