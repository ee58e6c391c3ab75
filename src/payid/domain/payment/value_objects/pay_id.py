"""PayID value object and URL normalization."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from payid.domain.payment.exceptions import InvalidPayIdError

# Dot-atom user grammar, as in the local part of an email address.
_USER_ATOM = r"[a-z0-9!#@%&*+/=?^_`{|}~-]+"
_USER_RE = re.compile(rf"^{_USER_ATOM}(?:\.{_USER_ATOM})*$", re.IGNORECASE)


class PayId(BaseModel):
    """
    Value object for a normalized PayID (``user$host``).

    Both parts are stored lowercase, so two PayIDs compare equal
    regardless of the casing a client used.
    """

    user: str = Field(..., min_length=1, description="User part (URL path)")
    host: str = Field(..., min_length=1, description="Host serving the PayID")

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        str_to_lower=True,
    )

    @classmethod
    def parse(cls, value: str) -> PayId:
        """Parse the canonical ``user$host`` form."""
        user, sep, host = value.strip().rpartition("$")
        if not sep or not user or not host:
            msg = "A PayID must be of the form user$host"
            raise InvalidPayIdError(value, msg)
        if not _USER_RE.match(user):
            msg = f"Invalid PayID user '{user}'"
            raise InvalidPayIdError(value, msg)
        return cls(user=user, host=host)

    def to_url(self) -> str:
        return f"https://{self.host}/{self.user}"

    def __str__(self) -> str:
        return f"{self.user}${self.host}"


def pay_id_from_url(url: str) -> PayId:
    """Convert a PayID URL (``https://host/user``) into a PayId.

    Parameters
    ----------
    url
        The URL the PayID request was made to

    Returns
    -------
    The normalized PayId

    Raises
    ------
    InvalidPayIdError
        If the URL is not HTTPS or carries no valid user in its path
    """
    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()

    if scheme not in ("http", "https"):
        msg = "Invalid URL protocol: PayID URLs must be HTTP/HTTPS."
        raise InvalidPayIdError(url, msg)
    if scheme != "https":
        msg = "Invalid URL protocol: PayID URLs must be HTTPS."
        raise InvalidPayIdError(url, msg)

    host = parts.hostname
    user = parts.path[1:] if parts.path.startswith("/") else parts.path
    if not host or not user or not _USER_RE.match(user):
        msg = "A PayID must have a user in the path, like https://example.com/alice"
        raise InvalidPayIdError(url, msg)

    return PayId(user=user, host=host)
