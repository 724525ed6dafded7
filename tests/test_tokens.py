import pytest
from jose import jwt

from tracker.auth.tokens import (
    authenticate,
    create_access_token,
    create_simple_token,
    issue_token,
)
from tracker.config import settings
from tracker.core.exceptions import InvalidCredentialError, NotAuthenticatedError


def test_simple_token_resolves_user_id():
    assert authenticate("Bearer simple-token-42", scheme="simple") == 42


def test_issued_simple_token_round_trips():
    token = issue_token(17, scheme="simple")
    assert token == create_simple_token(17) == "simple-token-17"
    assert authenticate(f"Bearer {token}", scheme="simple") == 17


@pytest.mark.parametrize("header", [
    "Bearer garbage",
    "simple-token-42",
    "Bearer simple-token-",
    "Bearer simple-token-0",
    "Bearer simple-token--3",
    "Bearer simple-token-4x",
    "Bearer simple-token-4 2",
    "Bearer simple-token-+5",
    "bearer simple-token-42",
    "Token simple-token-42",
    "Bearer simple-token-9223372036854775808",
    "Bearer simple-token-" + "9" * 20,
    "Bearer simple-token-" + "9" * 5000,
])
def test_malformed_credentials_are_rejected(header):
    with pytest.raises(InvalidCredentialError):
        authenticate(header, scheme="simple")


@pytest.mark.parametrize("header", [None, "", "   "])
def test_missing_credential(header):
    with pytest.raises(NotAuthenticatedError):
        authenticate(header, scheme="simple")


def test_jwt_scheme_round_trip():
    token = create_access_token(9)
    assert authenticate(f"Bearer {token}", scheme="jwt") == 9


def test_jwt_scheme_rejects_tampered_token():
    token = create_access_token(9)
    other = create_access_token(10)
    forged = ".".join(token.split(".")[:2] + [other.split(".")[2]])
    with pytest.raises(InvalidCredentialError):
        authenticate(f"Bearer {forged}", scheme="jwt")


def test_jwt_scheme_rejects_simple_token():
    with pytest.raises(InvalidCredentialError):
        authenticate("Bearer simple-token-42", scheme="jwt")


def test_jwt_scheme_rejects_expired_token():
    token = create_access_token(9, expires_minutes=-1)
    with pytest.raises(InvalidCredentialError):
        authenticate(f"Bearer {token}", scheme="jwt")


def test_largest_storable_id_is_accepted():
    assert authenticate("Bearer simple-token-9223372036854775807", scheme="simple") == 2 ** 63 - 1


def test_zero_expiry_is_not_replaced_by_default():
    claims = jwt.get_unverified_claims(create_access_token(9, expires_minutes=0))
    assert claims["exp"] == claims["iat"]


def test_default_expiry_comes_from_settings():
    claims = jwt.get_unverified_claims(create_access_token(9))
    assert claims["exp"] - claims["iat"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
