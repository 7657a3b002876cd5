# forum/tests/test_session.py
from datetime import datetime, timedelta, timezone

import pytest
from starlette.responses import Response

from forum.core.errors import AuthError, InvalidSessionError, PersistenceError
from forum.core.session import (
    SessionRegistry,
    encode_cached_user,
    read_cached_user,
    set_session_cookies,
)
from forum.models import UserModel
from forum.schemas.user import CachedUser


def test_register_issues_valid_session(db, make_user):
    user, token = make_user()
    assert token
    assert SessionRegistry(db).validate(token) == user.id


def test_ensure_keeps_existing_token(db, make_user):
    user, token = make_user()
    registry = SessionRegistry(db)
    assert registry.ensure(user.id, token) == token
    assert registry.ensure(user.id, "some-other-token") == "some-other-token"


def test_ensure_issues_when_empty(db, make_user):
    user, _ = make_user()
    registry = SessionRegistry(db)
    for empty in ("", None):
        token = registry.ensure(user.id, empty)
        assert token
        assert registry.validate(token) == user.id


def test_reissue_replaces_token_on_user_row(db, make_user):
    user, first = make_user()
    registry = SessionRegistry(db)
    second = registry.issue(user.id)
    assert second != first
    assert db.get(UserModel, user.id).session_id == second
    with pytest.raises(InvalidSessionError):
        registry.validate(first)


def test_tokens_are_unique_across_users(db, make_user):
    _, token_a = make_user("joon", "joon@x.com")
    _, token_b = make_user("gigi", "gigi@x.com")
    assert token_a != token_b


@pytest.mark.parametrize("token", ["", None, "never-issued"])
def test_validate_unknown_token(db, token):
    with pytest.raises(InvalidSessionError) as exc_info:
        SessionRegistry(db).validate(token)
    assert isinstance(exc_info.value, AuthError)


def test_issue_for_missing_user(db):
    with pytest.raises(PersistenceError):
        SessionRegistry(db).issue(424242)


def test_ensure_keeps_token_stored_by_concurrent_login(db, session_factory, make_user):
    user, _ = make_user()
    user_model = db.get(UserModel, user.id)
    user_model.session_id = None
    db.commit()

    # both requests read an empty session_id before either wrote one
    other = session_factory()
    try:
        first = SessionRegistry(db).ensure(user.id, None)
        second = SessionRegistry(other).ensure(user.id, None)
    finally:
        other.close()

    assert second == first
    assert SessionRegistry(db).validate(first) == user.id


def test_ensure_for_missing_user(db):
    with pytest.raises(PersistenceError):
        SessionRegistry(db).ensure(424242, None)


def test_cached_user_round_trip(settings):
    user = CachedUser(id=1, username="joon", email="joon@x.com")
    value = encode_cached_user(user, settings, datetime.now(timezone.utc) + timedelta(minutes=5))
    assert read_cached_user(value, settings) == user


def test_cached_user_rejects_tampering(settings):
    user = CachedUser(id=1, username="joon", email="joon@x.com")
    value = encode_cached_user(user, settings, datetime.now(timezone.utc) + timedelta(minutes=5))
    forged = settings.model_copy(update={"secret_key": "someone-else"})
    assert read_cached_user(value, forged) is None
    assert read_cached_user(value[:-2] + "xx", settings) is None
    assert read_cached_user('{"id": 1, "username": "joon", "email": "joon@x.com"}', settings) is None
    assert read_cached_user(None, settings) is None


def test_cached_user_expires(settings):
    user = CachedUser(id=1, username="joon", email="joon@x.com")
    value = encode_cached_user(user, settings, datetime.now(timezone.utc) - timedelta(seconds=5))
    assert read_cached_user(value, settings) is None


def test_session_cookies_share_expiry_and_flags(settings):
    response = Response()
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    user = CachedUser(id=7, username="joon", email="joon@x.com")

    expires_at = set_session_cookies(response, "token-123", user, settings, now=now)

    assert expires_at == now + timedelta(minutes=30)
    cookies = response.headers.getlist("set-cookie")
    assert len(cookies) == 2
    session_cookie = next(c for c in cookies if c.startswith(settings.session_cookie_name + "="))
    user_cookie = next(c for c in cookies if c.startswith(settings.user_cookie_name + "="))
    assert session_cookie.startswith("forum_session=token-123;")
    for cookie in (session_cookie, user_cookie):
        lowered = cookie.lower()
        assert "httponly" in lowered
        assert "samesite=strict" in lowered
        assert "path=/" in lowered
        assert "; secure" not in lowered
        assert "expires=mon, 19 oct 2026 12:30:00 gmt" in lowered


def test_session_cookies_secure_in_production(settings):
    response = Response()
    production = settings.model_copy(update={"cookie_secure": True})
    set_session_cookies(response, "t", CachedUser(id=1, username="u", email="e"), production)
    for cookie in response.headers.getlist("set-cookie"):
        assert "; secure" in cookie.lower()
