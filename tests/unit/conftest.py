from datetime import datetime, timedelta, UTC
from uuid import UUID

import pytest
from pytest import MonkeyPatch

from clickshortener.constants import ENV
from clickshortener.dao.memory import LinkMemoryDAO, MailboxMemoryDAO
from clickshortener.models import LinkRecord
from clickshortener.registry import LinkRegistry


@pytest.fixture(autouse=True)
def _env(monkeypatch: MonkeyPatch) -> None:
    """Start every test from a clean configuration environment."""
    for name in ENV.App:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def owner_id() -> UUID:
    return UUID('11111111-1111-1111-1111-111111111111')


@pytest.fixture
def other_owner_id() -> UUID:
    return UUID('22222222-2222-2222-2222-222222222222')


@pytest.fixture
def ttl() -> timedelta:
    return timedelta(hours=1)


@pytest.fixture
def created_at() -> datetime:
    return datetime(2026, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def make_record(owner_id, ttl, created_at):
    """Build LinkRecords with sensible defaults."""

    def _make_record(slug='abc12345', target='https://example.com', owner=None, max_clicks=None, at=None) -> LinkRecord:
        return LinkRecord.new(
            slug=slug,
            target=target,
            owner_id=owner or owner_id,
            max_clicks=max_clicks,
            created_at=at or created_at,
            ttl=ttl,
        )

    return _make_record


@pytest.fixture
def links() -> LinkMemoryDAO:
    return LinkMemoryDAO()


@pytest.fixture
def mailbox() -> MailboxMemoryDAO:
    return MailboxMemoryDAO()


@pytest.fixture
def registry(links, mailbox, ttl) -> LinkRegistry:
    return LinkRegistry(links, mailbox, ttl=ttl)
