"""Password hashing and session-based access control."""

from dataclasses import dataclass

import bcrypt
from fastapi import Depends, Request

from recruitment.core.exceptions import forbidden_exception, unauthorized_exception

SESSION_USERNAME_KEY = "username"
SESSION_ROLE_KEY = "role"


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


@dataclass(frozen=True)
class Principal:
    """Authenticated user as known to the session."""

    username: str
    role: str


def login_session(request: Request, principal: Principal) -> None:
    request.session.clear()
    request.session[SESSION_USERNAME_KEY] = principal.username
    request.session[SESSION_ROLE_KEY] = principal.role


def logout_session(request: Request) -> None:
    request.session.clear()


def session_principal(request: Request) -> Principal | None:
    """Principal stored in the session cookie, if any."""
    username = request.session.get(SESSION_USERNAME_KEY)
    role = request.session.get(SESSION_ROLE_KEY)
    if not username or not role:
        return None
    return Principal(username=username, role=role)


def get_current_principal(request: Request) -> Principal:
    """FastAPI dependency: the logged-in principal or 401."""
    principal = session_principal(request)
    if principal is None:
        raise unauthorized_exception()
    return principal


def require_role(role: str):
    """Build a dependency that only lets ``role`` through."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role != role:
            raise forbidden_exception()
        return principal

    return dependency
