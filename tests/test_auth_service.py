import asyncio
import json

import pytest

from portal.schemas.portal_schema import SignupRequest
from portal.services.auth_service import (
    STORAGE_KEY,
    AuthContext,
    AuthSession,
    display_name_from_email,
)


@pytest.fixture
def auth(storage):
    return AuthContext(storage, password="password123", delay=0)


@pytest.mark.parametrize(
    "email, expected",
    [
        ("john.doe@email.com", "John Doe"),
        ("mary_ann.smith99@example.org", "Mary Ann Smith"),
        ("alice@example.com", "Alice"),
        ("bob-o'neil@x.io", "Bob O Neil"),
        ("jSmith@corp.com", "JSmith"),
    ],
)
def test_display_name_from_email(email, expected):
    assert display_name_from_email(email) == expected


def test_login_with_demo_password_succeeds_for_any_email(auth, storage):
    session = asyncio.run(auth.login("jane.roe@example.com", "password123"))

    assert session is not None
    assert session.user.name == "Jane Roe"
    assert session.user.email == "jane.roe@example.com"
    assert session.user.id == "1"
    assert session.user.phone == "+1 (555) 123-4567"
    assert auth.is_authenticated is True

    stored = json.loads(storage.get_item(STORAGE_KEY))
    assert stored["token"] == session.token
    assert stored["user"]["email"] == "jane.roe@example.com"


def test_login_with_wrong_password_fails(auth, storage):
    assert asyncio.run(auth.login("john@example.com", "wrong")) is None
    assert auth.is_authenticated is False
    assert auth.user is None
    assert storage.get_item(STORAGE_KEY) is None


def test_signup_always_succeeds(auth):
    request = SignupRequest(
        name="Ada Lovelace",
        email="ada@example.com",
        password="anything",
        phone="555-0100",
    )
    session = asyncio.run(auth.signup(request))

    assert session.user.name == "Ada Lovelace"
    assert session.user.phone == "555-0100"
    assert session.user.address is None
    assert session.user.id.isdigit()
    assert auth.is_authenticated is True


def test_session_is_rehydrated_from_storage(auth, storage):
    session = asyncio.run(auth.login("john.doe@email.com", "password123"))

    reloaded = AuthContext(storage, delay=0)
    assert reloaded.is_authenticated is True
    assert reloaded.user == session.user
    assert reloaded.resolve(session.token) is not None


def test_logout_clears_persisted_state(auth, storage):
    asyncio.run(auth.login("john.doe@email.com", "password123"))
    auth.logout()

    assert auth.is_authenticated is False
    assert storage.get_item(STORAGE_KEY) is None
    assert AuthContext(storage, delay=0).is_authenticated is False


def test_resolve_rejects_unknown_tokens(auth):
    session = asyncio.run(auth.login("john.doe@email.com", "password123"))
    assert auth.resolve(session.token) is session
    assert auth.resolve("not-the-token") is None
    assert auth.resolve(None) is None


def test_new_login_replaces_previous_session(auth):
    first = asyncio.run(auth.login("first@example.com", "password123"))
    second = asyncio.run(auth.login("second@example.com", "password123"))
    assert auth.resolve(first.token) is None
    assert auth.resolve(second.token) is second


def test_overlapping_logins_leave_one_consistent_session(storage):
    auth = AuthContext(storage, delay=0.01)

    async def both():
        return await asyncio.gather(
            auth.login("first@example.com", "password123"),
            auth.login("second@example.com", "password123"),
        )

    first, second = asyncio.run(both())

    live = [s for s in (first, second) if auth.resolve(s.token) is s]
    assert live == [auth.session]
    assert json.loads(storage.get_item(STORAGE_KEY))["token"] == auth.session.token


@pytest.mark.parametrize("blob", ["{not json", json.dumps({"user": {"id": "1"}}), json.dumps([1, 2])])
def test_corrupt_stored_session_is_ignored(storage, blob):
    storage.set_item(STORAGE_KEY, blob)
    auth = AuthContext(storage, delay=0)
    assert auth.is_authenticated is False


def test_session_json_round_trip():
    raw = json.dumps({
        "token": "abc",
        "user": {"id": "1", "name": "John Doe", "email": "john@example.com"},
    })
    session = AuthSession.from_json(raw)
    assert session.token == "abc"
    assert AuthSession.from_json(session.to_json()) == session
