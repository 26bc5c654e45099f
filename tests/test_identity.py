"""Tests for viewer resolution."""

from uuid import uuid4

from mess_review.domain.models import Viewer
from mess_review.services.identity import IdentityService, parse_bearer_token
from tests.conftest import FakeIdentityProvider


def test_parse_bearer_token() -> None:
    assert parse_bearer_token("Bearer abc") == "abc"
    assert parse_bearer_token("bearer   abc  ") == "abc"
    assert parse_bearer_token("Basic abc") is None
    assert parse_bearer_token("Bearer ") is None
    assert parse_bearer_token(None) is None


def test_resolve_viewer() -> None:
    viewer = Viewer(id=uuid4())
    service = IdentityService(FakeIdentityProvider({"good": viewer}))

    assert service.resolve_viewer("Bearer good") == viewer
    assert service.resolve_viewer("Bearer bad") is None
    assert service.resolve_viewer(None) is None
