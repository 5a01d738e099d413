"""User registration: username uniqueness and credential derivation.

The uniqueness check here is a fast-path rejection.  Two concurrent
registrations can both pass it; the user store's unique index on
``username`` settles the race when the second insert lands.
"""

import asyncio
import logging
from typing import Any

from bloglist.config import get_settings
from bloglist.errors import ErrorKind, ValidationError
from bloglist.models.user import UserDraft
from bloglist.services.security import MAX_PASSWORD_BYTES, BcryptHasher, get_password_hasher
from bloglist.services.storage import RecordStore
from bloglist.services.validator import is_blank

logger = logging.getLogger(__name__)


def _check_password(password: Any, min_length: int) -> str:
    if not isinstance(password, str) or not password:
        raise ValidationError.missing("password")
    if len(password) < min_length:
        raise ValidationError(
            ErrorKind.WEAK_CREDENTIAL,
            f"`password` must be at least {min_length} characters long",
            field="password",
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError.invalid(
            "password", f"must be at most {MAX_PASSWORD_BYTES} bytes"
        )
    return password


async def register_user(
    users: RecordStore,
    username: Any,
    name: Any,
    password: Any,
    hasher: BcryptHasher | None = None,
    min_password_length: int | None = None,
) -> UserDraft:
    """Validate a registration and return the draft to insert.

    Raises ``ValidationError`` with kind ``MissingRequiredField`` for an empty
    username or password, ``WeakCredential`` for a too-short password and
    ``DuplicateKey`` when *username* is already taken (exact, case-sensitive).
    Only reads from *users*; the caller performs the insert.
    """
    if min_password_length is None:
        min_password_length = get_settings().min_password_length
    if hasher is None:
        hasher = get_password_hasher()

    if is_blank(username):
        raise ValidationError.missing("username")
    password = _check_password(password, min_password_length)

    if await users.find_one(username=username) is not None:
        logger.warning("Rejected registration: username %r already taken", username)
        raise ValidationError.duplicate("username", username)

    # bcrypt is CPU bound; keep it off the event loop
    password_hash = await asyncio.to_thread(hasher.hash, password)
    return UserDraft(
        username=username,
        name=name if isinstance(name, str) else "",
        password_hash=password_hash,
    )
