"""Blog payload validation.

Creation is strict: a blog is only stored with a title and a url.  Updates
are permissive and only check the fields they carry, so a client can bump
``likes`` without resubmitting the whole blog.
"""

import logging
from collections.abc import Mapping
from typing import Any

from bloglist.errors import ValidationError
from bloglist.models.blog import BlogDraft

logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("title", "url")
UPDATABLE_FIELDS = ("title", "author", "url", "likes")


def is_blank(value: Any) -> bool:
    """True for anything that is not a string with visible characters."""
    return not isinstance(value, str) or not value.strip()


def _is_valid_likes(value: Any) -> bool:
    # bool is an int subclass; True is not a like count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def normalize_likes(value: Any) -> int:
    """Return *value* if it is a non-negative integer, otherwise 0."""
    if _is_valid_likes(value):
        return value
    if value is not None:
        logger.debug("Replacing malformed likes %r with 0", value)
    return 0


def validate_for_create(payload: Mapping[str, Any]) -> BlogDraft:
    """Accept or reject a candidate blog and fill in defaults.

    Raises ``ValidationError`` (``MissingRequiredField``) for the first of
    ``title``/``url`` that is absent or blank.  ``likes`` defaults to 0 and
    ``author`` to an empty string.
    """
    for field in REQUIRED_FIELDS:
        if is_blank(payload.get(field)):
            logger.warning("Rejected blog: missing %s", field)
            raise ValidationError.missing(field)

    author = payload.get("author")
    return BlogDraft(
        title=payload["title"],
        author=author if isinstance(author, str) else "",
        url=payload["url"],
        likes=normalize_likes(payload.get("likes")),
    )


def validate_for_update(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Build the sparse patch for a partial update.

    Only the fields present in *payload* are checked; ``title`` and ``url``
    are not required here.  ``id`` and unknown keys are dropped.  Whether the
    target blog exists is for storage to decide.
    """
    patch: dict[str, Any] = {}
    for field in UPDATABLE_FIELDS:
        if field not in payload:
            continue
        value = payload[field]
        if field == "likes":
            if not _is_valid_likes(value):
                raise ValidationError.invalid("likes", "must be a non-negative integer")
        elif field in REQUIRED_FIELDS:
            if is_blank(value):
                raise ValidationError.invalid(field, "must not be empty")
        elif not isinstance(value, str):
            raise ValidationError.invalid(field, "must be a string")
        patch[field] = value
    return patch
