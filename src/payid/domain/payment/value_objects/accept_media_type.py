"""Accept media type value object and grammar parser.

A PayID client states which payment network and environment it wants
through Accept tokens of the form::

    application/{payment_network}(-{environment})?+json(;q=<quality>)?

e.g. ``application/xrpl-testnet+json;q=0.5`` or ``application/ach+json``.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from payid.domain.payment.exceptions import InvalidMediaTypeError

DEFAULT_QUALITY = 1.0

_MEDIA_TYPE_RE = re.compile(
    r"^application/(?P<network>[a-z0-9_]+)(?:-(?P<environment>[a-z0-9_]+))?\+json$",
)
_QUALITY_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_TOKEN_RE = re.compile(r"^[a-z0-9_]+$")


class AcceptMediaType(BaseModel):
    """One parsed client preference.

    ``environment`` set to None is the wildcard: any environment of the
    payment network is acceptable.
    """

    payment_network: str = Field(..., min_length=1)
    environment: Optional[str] = Field(default=None, min_length=1)
    quality: float = Field(default=DEFAULT_QUALITY, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True, str_to_lower=True)

    @field_validator("payment_network", "environment")
    @classmethod
    def validate_token(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _TOKEN_RE.match(v):
            msg = "Payment network and environment must be alphanumeric tokens"
            raise ValueError(msg)
        return v

    @property
    def media_type(self) -> str:
        """Canonical media type, used as the response Content-Type."""
        if self.environment is None:
            return f"application/{self.payment_network}+json"
        return f"application/{self.payment_network}-{self.environment}+json"

    @property
    def is_wildcard_environment(self) -> bool:
        return self.environment is None

    @property
    def key(self) -> tuple[str, Optional[str]]:
        return (self.payment_network, self.environment)

    def matches(self, payment_network: str, environment: Optional[str]) -> bool:
        """Check whether an address on (network, environment) satisfies this."""
        if payment_network != self.payment_network:
            return False
        return self.environment is None or environment == self.environment

    def __str__(self) -> str:
        return format_accept_media_type(self)


def parse_accept_media_type(token: str) -> AcceptMediaType:
    """Parse a single Accept token.

    Parameters
    ----------
    token
        One comma-separated segment of an Accept header

    Returns
    -------
    The parsed AcceptMediaType

    Raises
    ------
    InvalidMediaTypeError
        If the token does not match the PayID media type grammar, or
        carries a quality outside [0, 1] or any parameter besides ``q``
    """
    media_range, *params = (part.strip() for part in token.split(";"))
    media_range = media_range.lower()

    if media_range == "application/json":
        msg = (
            f"Invalid media type '{token}': "
            "application/json does not name a payment network"
        )
        raise InvalidMediaTypeError(token, msg)

    match = _MEDIA_TYPE_RE.match(media_range)
    if match is None:
        raise InvalidMediaTypeError(token)

    quality = DEFAULT_QUALITY
    seen_quality = False
    for param in params:
        name, sep, value = param.partition("=")
        name = name.strip().lower()
        value = value.strip()
        if not sep or name != "q" or seen_quality:
            msg = f"Invalid media type parameter '{param}' in '{token}'"
            raise InvalidMediaTypeError(token, msg)
        quality = _parse_quality(token, value)
        seen_quality = True

    return AcceptMediaType(
        payment_network=match.group("network"),
        environment=match.group("environment"),
        quality=quality,
    )


def format_accept_media_type(accept_type: AcceptMediaType) -> str:
    """Render an AcceptMediaType back into an Accept token."""
    if accept_type.quality == DEFAULT_QUALITY:
        return accept_type.media_type
    return f"{accept_type.media_type};q={_format_quality(accept_type.quality)}"


def _format_quality(quality: float) -> str:
    text = repr(quality)
    if "e" in text:
        # Exponent notation is not part of the quality grammar
        text = f"{Decimal(text):f}"
    return text


def _parse_quality(token: str, value: str) -> float:
    if not _QUALITY_RE.match(value):
        msg = f"Invalid quality value '{value}' in '{token}'"
        raise InvalidMediaTypeError(token, msg)

    quality = float(value)
    if not 0.0 <= quality <= 1.0:
        msg = f"Quality value '{value}' in '{token}' must be between 0 and 1"
        raise InvalidMediaTypeError(token, msg)
    return quality
