"""
Unit tests for the access gate (api.v1.deps): token resolution and role checks.
"""
import datetime as dt

import jwt
import pytest

from storerating.api.v1.deps import authenticate, authorize, require_roles
from storerating.core.errors import Forbidden, Unauthenticated
from storerating.core.security import JWT_ALG, JWT_SECRET, Role, create_access_token
from storerating.schemas.auth import Principal


def _principal(role: Role) -> Principal:
    return Principal(id=1, name="Someone With A Long Name", email="p@example.com", address="x", role=role)


class TestAuthorize:

    @pytest.mark.parametrize("role", list(Role))
    def test_admits_member_roles(self, role):
        principal = _principal(role)
        assert authorize(principal, frozenset({role})) is principal

    @pytest.mark.parametrize(
        "role, allowed",
        [
            (Role.USER, {Role.ADMIN}),
            (Role.STORE_OWNER, {Role.USER}),
            (Role.ADMIN, {Role.STORE_OWNER, Role.USER}),
        ],
    )
    def test_rejects_non_members(self, role, allowed):
        with pytest.raises(Forbidden) as excinfo:
            authorize(_principal(role), frozenset(allowed))
        assert excinfo.value.status_code == 403


class TestRequireRoles:

    def test_requires_at_least_one_role(self):
        with pytest.raises(ValueError):
            require_roles()

    def test_rejects_raw_strings(self):
        with pytest.raises(TypeError):
            require_roles("admin")


class TestPrincipal:

    def test_principal_has_no_password_field(self):
        assert "password_hash" not in Principal.model_fields


@pytest.mark.asyncio
async def test_authenticate_without_token(db):
    with pytest.raises(Unauthenticated) as excinfo:
        await authenticate(None)
    assert excinfo.value.code == "AUTH_REQUIRED"


@pytest.mark.asyncio
async def test_authenticate_with_garbage_token(db):
    with pytest.raises(Unauthenticated) as excinfo:
        await authenticate("not-a-token")
    assert excinfo.value.code == "AUTH_INVALID_TOKEN"


@pytest.mark.asyncio
async def test_authenticate_with_non_numeric_subject(db):
    token = jwt.encode(
        {"sub": "abc", "exp": dt.datetime.now(dt.timezone.utc) + dt.timedelta(minutes=5)},
        JWT_SECRET,
        algorithm=JWT_ALG,
    )
    with pytest.raises(Unauthenticated) as excinfo:
        await authenticate(token)
    assert excinfo.value.code == "AUTH_INVALID_TOKEN"


@pytest.mark.asyncio
async def test_authenticate_with_stale_user(db):
    token = create_access_token("999", Role.ADMIN.value)
    with pytest.raises(Unauthenticated) as excinfo:
        await authenticate(token)
    assert excinfo.value.code == "AUTH_USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_authenticate_reads_role_from_database(create_user):
    user, _ = await create_user()
    # A token claiming admin does not make a shopper an admin
    token = create_access_token(str(user.id), Role.ADMIN.value)
    principal = await authenticate(token)
    assert principal.id == user.id
    assert principal.role is Role.USER
    assert principal.email == user.email
