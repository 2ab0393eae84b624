from typing import Iterable

from django.contrib.auth import get_user_model

# Canonical role names
ROLE_USER = "user"
ROLE_ADMIN = "admin"


def _fetch_user_from_db(user):
    """Fetch a fresh copy of the user with only the fields RBAC checks need.

    Returns None if the user is not authenticated or no longer exists.
    """
    if not getattr(user, "is_authenticated", False):
        return None
    User = get_user_model()
    return (
        User.objects.only("id", "role", "is_superuser", "is_blacklisted", "is_blockchain_verified")
        .filter(pk=getattr(user, "pk", None))
        .first()
    )


def is_admin(user) -> bool:
    """Consistent admin check across the codebase, verified against the database."""
    db_user = _fetch_user_from_db(user)
    if not db_user:
        return False
    return bool(db_user.is_superuser or db_user.role == ROLE_ADMIN)


def is_blacklisted(user) -> bool:
    """A token issued before blacklisting must not keep write access, so read the flag fresh."""
    db_user = _fetch_user_from_db(user)
    return bool(db_user and db_user.is_blacklisted)


def is_blockchain_verified(user) -> bool:
    db_user = _fetch_user_from_db(user)
    return bool(db_user and db_user.is_blockchain_verified)


def has_role(user, role: str) -> bool:
    if role == ROLE_ADMIN:
        return is_admin(user)
    return _fetch_user_from_db(user) is not None


def has_any_role(user, roles: Iterable[str]) -> bool:
    return any(has_role(user, r) for r in roles)
