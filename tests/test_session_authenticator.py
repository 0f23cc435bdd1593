"""Session token issue and verification."""

from datetime import datetime, timedelta

import pytest
import pytz
from jose import jwt

from core.exceptions import ConfigurationError
from core.result import Err, ErrorKind, Ok
from utils.session_authenticator import INVALID_TOKEN_MESSAGE, SessionAuthenticator


def test_issue_then_verify_round_trips_owner(authenticator):
    assert authenticator.verify(authenticator.issue("owner-a")) == Ok("owner-a")
    assert authenticator.verify(authenticator.issue("owner-b")) == Ok("owner-b")


def test_token_carries_seven_day_expiry_by_default():
    auth = SessionAuthenticator(secret_key="s")
    now = datetime(2026, 1, 1, tzinfo=pytz.utc)
    claims = jwt.get_unverified_claims(auth.issue("owner-a", now=now))
    assert claims["sub"] == "owner-a"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def _assert_invalid(result):
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.INVALID_TOKEN
    assert result.message == INVALID_TOKEN_MESSAGE


def test_token_for_a_never_authenticates_as_b(authenticator):
    token_a = authenticator.issue("owner-a")
    token_b = authenticator.issue("owner-b")
    header_a, _, signature_a = token_a.split(".")
    _, payload_b, _ = token_b.split(".")
    _assert_invalid(authenticator.verify(f"{header_a}.{payload_b}.{signature_a}"))


def test_foreign_secret_is_rejected(authenticator):
    other = SessionAuthenticator(secret_key="someone-else")
    _assert_invalid(authenticator.verify(other.issue("owner-a")))


def test_expired_token_is_rejected(authenticator):
    issued = datetime.now(pytz.utc) - timedelta(minutes=authenticator.expire_minutes + 1)
    _assert_invalid(authenticator.verify(authenticator.issue("owner-a", now=issued)))


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x"])
def test_malformed_token_is_rejected(authenticator, token):
    _assert_invalid(authenticator.verify(token))


def test_token_without_subject_is_rejected(authenticator):
    token = jwt.encode(
        {"exp": datetime.now(pytz.utc) + timedelta(minutes=5)},
        "unit-test-secret",
        algorithm="HS256",
    )
    _assert_invalid(authenticator.verify(token))


def test_unsigned_token_is_rejected(authenticator):
    token = jwt.encode({"sub": "owner-a"}, "unit-test-secret", algorithm="HS256")
    header, payload, _ = token.split(".")
    _assert_invalid(authenticator.verify(f"{header}.{payload}."))


@pytest.mark.parametrize("kwargs", [{"secret_key": ""}, {"secret_key": "s", "expire_minutes": 0}])
def test_bad_configuration_is_refused(kwargs):
    with pytest.raises(ConfigurationError):
        SessionAuthenticator(**kwargs)
