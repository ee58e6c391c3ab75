"""Ranking of client Accept preferences."""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Optional, Sequence

from payid.domain.payment.value_objects.accept_media_type import (
    AcceptMediaType,
    parse_accept_media_type,
)

logger = logging.getLogger(__name__)


def split_accept_header(value: Optional[str]) -> list[str]:
    """Split a raw Accept header value into its comma-separated tokens."""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def rank_accept_media_types(tokens: Sequence[str]) -> list[AcceptMediaType]:
    """Parse and sort Accept tokens by client preference.

    All tokens must be valid: the first malformed one aborts ranking, so
    a partially understood header never selects a lower-priority address.

    Parameters
    ----------
    tokens
        Accept tokens in header order

    Returns
    -------
    Preferences sorted by quality (descending). Equal qualities keep
    header order, and duplicate (network, environment) pairs keep only
    their highest-quality occurrence. Types with ``q=0`` are refused by
    the client and left out.

    Raises
    ------
    InvalidMediaTypeError
        If any token does not match the PayID media type grammar
    """
    parsed = [parse_accept_media_type(token) for token in tokens]

    # sorted() is stable: ties stay in header order
    ranked = sorted(parsed, key=attrgetter("quality"), reverse=True)

    seen: set[tuple[str, Optional[str]]] = set()
    unique: list[AcceptMediaType] = []
    for accept_type in ranked:
        if accept_type.key in seen:
            logger.debug("Dropping dominated duplicate Accept type %s", accept_type)
            continue
        seen.add(accept_type.key)
        if accept_type.quality <= 0:
            logger.debug("Dropping refused Accept type %s", accept_type)
            continue
        unique.append(accept_type)

    return unique
