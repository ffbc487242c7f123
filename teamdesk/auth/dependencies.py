# teamdesk/auth/dependencies.py
from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Header, Depends, Request
from sqlalchemy.orm import Session

from teamdesk import config
from teamdesk.database import get_db
from teamdesk.errors import AuthenticationError
from teamdesk.auth.jwt_handler import decode_jwt
from teamdesk.users.models import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Who is calling. Passed explicitly into every domain call."""

    user_id: int
    email: str
    name: str


# -------------------------------------------
# Helper: Extract Bearer token safely
# -------------------------------------------
def _extract_bearer(auth_header: Optional[str]) -> Optional[str]:
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


def _token_from_request(request: Request, authorization: Optional[str]) -> Optional[str]:
    """Authorization: Bearer <token> first, then the session cookie."""
    return _extract_bearer(authorization) or request.cookies.get(config.SESSION_COOKIE_NAME)


# -------------------------------------------
# Resolve token -> real DB user (single source of truth)
# -------------------------------------------
def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    token = _token_from_request(request, authorization)
    if not token:
        raise AuthenticationError()

    payload = decode_jwt(token)
    if payload is None:
        logger.warning("Rejected invalid or expired token on %s", request.url.path)
        raise AuthenticationError()

    try:
        uid = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.warning("Token without a usable subject on %s", request.url.path)
        raise AuthenticationError()

    user = db.get(User, uid)
    if user is None:
        logger.warning("Token for unknown user id=%s", uid)
        raise AuthenticationError()
    return user


def get_identity(user: User = Depends(get_current_user)) -> Identity:
    return Identity(user_id=user.id, email=user.email, name=user.name)
