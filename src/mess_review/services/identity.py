"""Viewer resolution from access tokens."""

from dataclasses import dataclass
from typing import Protocol

from mess_review.domain.models import Viewer

BEARER_PREFIX = "bearer "


class IdentityProvider(Protocol):
    """Interface to the managed auth backend."""

    def get_viewer(self, access_token: str) -> Viewer | None:
        """Return the user owning the token, or None if it is not valid."""


@dataclass
class IdentityService:
    """Service that turns Authorization headers into viewers."""

    provider: IdentityProvider

    def resolve_viewer(self, authorization: str | None) -> Viewer | None:
        """Return the viewer for a ``Bearer`` header, or None when anonymous."""
        token = parse_bearer_token(authorization)
        if token is None:
            return None
        return self.provider.get_viewer(token)


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an Authorization header value."""
    if authorization is None:
        return None
    cleaned = authorization.strip()
    if not cleaned.lower().startswith(BEARER_PREFIX):
        return None
    token = cleaned[len(BEARER_PREFIX) :].strip()
    return token or None
