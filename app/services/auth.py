"""
Authorization Gate

Decides whether a request carrying a bearer credential may run a
protected operation. Callers only see the outcome: the admitted user, or
None for a rejected credential.

A credential is admitted when:
1. Its signature and expiry are valid
2. Its "sub" claim names a well-formed identifier
3. That identifier belongs to an existing user
"""

import logging

from sqlalchemy.orm import Session

from app.models import User
from app.services.security import decode_access_token
from app.utils.identifiers import is_valid_object_id

logger = logging.getLogger(__name__)


def authorize(db: Session, token: str) -> User | None:
    """
    Admit or reject a bearer credential.

    Args:
        db: Database session
        token: The raw bearer token

    Returns:
        The user the token was issued to, or None if rejected
    """
    payload = decode_access_token(token)
    if payload is None:
        return None

    user_id = payload.get("sub")
    if not is_valid_object_id(user_id):
        logger.warning("Bearer token rejected: malformed subject")
        return None

    user = db.get(User, user_id)
    if user is None:
        logger.warning(f"Bearer token rejected: unknown user {user_id}")
        return None

    return user
