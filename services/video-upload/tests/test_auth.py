from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from auth import TOKEN_ISSUER, get_bearer_token, make_jwt, validate_jwt
from exceptions import InvalidCredentialsError, MissingCredentialsError

SECRET = "unit-test-secret"


class TestGetBearerToken:
    def test_extracts_token(self):
        assert get_bearer_token({"Authorization": "Bearer abc.def.ghi"}) == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert get_bearer_token({"authorization": "bearer abc"}) == "abc"

    @pytest.mark.parametrize(
        "headers",
        [{}, {"Authorization": ""}, {"Authorization": "Basic abc"}, {"Authorization": "Bearer "}],
    )
    def test_missing_or_malformed(self, headers):
        with pytest.raises(MissingCredentialsError):
            get_bearer_token(headers)


class TestValidateJWT:
    def test_round_trip(self):
        user_id = uuid4()
        token = make_jwt(user_id, SECRET, timedelta(minutes=5))

        assert validate_jwt(token, SECRET) == user_id

    def test_wrong_secret(self):
        token = make_jwt(uuid4(), SECRET, timedelta(minutes=5))

        with pytest.raises(InvalidCredentialsError):
            validate_jwt(token, "another-secret")

    def test_expired(self):
        token = make_jwt(uuid4(), SECRET, timedelta(seconds=-10))

        with pytest.raises(InvalidCredentialsError):
            validate_jwt(token, SECRET)

    def test_wrong_issuer(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iss": "someone-else", "sub": str(uuid4()), "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidCredentialsError):
            validate_jwt(token, SECRET)

    def test_subject_must_be_uuid(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iss": TOKEN_ISSUER, "sub": "not-a-uuid", "exp": now + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidCredentialsError):
            validate_jwt(token, SECRET)

    def test_garbage(self):
        with pytest.raises(InvalidCredentialsError):
            validate_jwt("not-a-jwt", SECRET)
