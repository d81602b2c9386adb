"""Data Access Object (DAO) implementation for managing short links in memory

This module provides an in-process implementation of LinkBaseDAO. All state
lives in two dictionaries guarded by a single reentrant lock:

    _links:   slug     -> LinkRecord
    _owners:  owner_id -> {slug, ...}

Responsibilities:
    - Insert-if-absent on the slug, updating the owner index in the same step;
    - Evaluate clicks (expiry, limit, decrement) as one transition per slug;
    - Remove records from both structures together (owner delete, expiry);
    - Provide snapshot views for listings and the expiration sweeper.

Records are frozen dataclasses. A click swaps the stored record for a copy
with one click less, so snapshots handed out never change under the caller.

Classes:
    LinkMemoryDAO:
        DAO for storing and retrieving LinkRecord in process memory.

Example:
    >>> dao = LinkMemoryDAO()
    >>> dao.insert(record)
    <LinkMemoryDAO>
    >>> dao.get(record.slug).target
    'https://example.com'
    >>> dao.delete(record.slug, requester=record.owner_id).slug
    'Ab9ZxQ1k'
"""

import logging
import threading
from datetime import datetime
from uuid import UUID

from beartype import beartype

from clickshortener.models import LinkRecord
from clickshortener.dao.base import LinkBaseDAO
from clickshortener.dao.memory.helpers import synchronized
from clickshortener.dao.exceptions import (
    LinkAlreadyExistsError,
    LinkExpiredError,
    LinkForbiddenError,
    LinkLimitExhaustedError,
    LinkNotFoundError,
)


logger = logging.getLogger(__name__)


class LinkMemoryDAO(LinkBaseDAO):
    """In-memory Data Access Object (DAO) for the link registry and owner index

    Attributes:
        _links (dict[str, LinkRecord]):
            Registry of records keyed by slug.
        _owners (dict[UUID, set[str]]):
            Owner index. An owner key exists only while it has at least one slug.
        _lock (threading.RLock):
            Guards both structures. Held for the whole of every public method.
    """

    def __init__(self):
        self._links: dict[str, LinkRecord] = {}
        self._owners: dict[UUID, set[str]] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return '<LinkMemoryDAO>'

    @synchronized
    @beartype
    def insert(self, record: LinkRecord) -> 'LinkMemoryDAO':
        """Insert a record unless its slug is taken

        The uniqueness check and both writes happen under the lock, so two
        concurrent inserts of the same slug can never both succeed.

        Raises:
            LinkAlreadyExistsError:
                If a record with the same slug already exists.
        """
        if record.slug in self._links:
            raise LinkAlreadyExistsError(f"Short link with code '{record.slug}' already exists.")

        self._links[record.slug] = record
        self._owners.setdefault(record.owner_id, set()).add(record.slug)
        return self

    @synchronized
    @beartype
    def get(self, slug: str, now: datetime | None = None) -> LinkRecord:
        record = self._lookup(slug)
        if now is not None and record.is_expired(now):
            self._remove(record)
            raise LinkExpiredError(f"Short link with code '{slug}' expired.", record=record)
        return record

    @synchronized
    @beartype
    def hit(self, slug: str, now: datetime) -> LinkRecord:
        """Consume one click of a record

        NOTE: lookup, expiry check, limit check and decrement run under one
              lock acquisition. With a budget of 1 and two concurrent callers:

              (thread 1): hit() -> remaining 1 -> stores remaining 0 -> returns
              (thread 2): hit() -> waits for the lock -> remaining 0 -> LinkLimitExhaustedError

              Neither caller can observe the pre-decrement budget once the
              other has consumed it.

        Raises:
            LinkNotFoundError:
                If no record with the given slug exists.
            LinkExpiredError:
                If the record outlived its TTL. The record is evicted.
            LinkLimitExhaustedError:
                If the record has no clicks left.
        """
        record = self._lookup(slug)

        if record.is_expired(now):
            self._remove(record)
            raise LinkExpiredError(f"Short link with code '{slug}' expired.", record=record)

        if record.remaining_clicks.is_exhausted:
            raise LinkLimitExhaustedError(f"Short link with code '{slug}' has no clicks left.", record=record)

        updated = record.clicked()
        self._links[slug] = updated
        return updated

    @synchronized
    @beartype
    def delete(self, slug: str, requester: UUID | None = None) -> LinkRecord:
        record = self._lookup(slug)
        if requester is not None and requester != record.owner_id:
            raise LinkForbiddenError(f"Short link with code '{slug}' belongs to another user.", record=record)

        self._remove(record)
        return record

    @synchronized
    @beartype
    def evict(self, slug: str, now: datetime) -> LinkRecord | None:
        """Remove a record if its expiry is strictly before `now`, returning it

        Returns None when the slug is gone or the record is still live. The
        sweeper uses this instead of delete() so that a slug re-used between
        its scan and the eviction is never removed by mistake.
        """
        record = self._links.get(slug)
        if record is None or not record.expires_at < now:
            return None

        self._remove(record)
        return record

    @synchronized
    @beartype
    def list_by_owner(self, owner_id: UUID) -> list[LinkRecord]:
        records = [self._links[slug] for slug in self._owners.get(owner_id, ())]
        return sorted(records, key=lambda record: (record.created_at, record.slug))

    @synchronized
    @beartype
    def expired(self, now: datetime) -> list[LinkRecord]:
        return [record for record in self._links.values() if record.expires_at < now]

    @synchronized
    def count(self) -> int:
        return len(self._links)

    # Internal helpers, called with the lock held

    def _lookup(self, slug: str) -> LinkRecord:
        record = self._links.get(slug)
        if record is None:
            raise LinkNotFoundError(f"Short link with code '{slug}' not found.")
        return record

    def _remove(self, record: LinkRecord) -> None:
        del self._links[record.slug]
        slugs = self._owners.get(record.owner_id)
        if slugs is not None:
            slugs.discard(record.slug)
            if not slugs:
                del self._owners[record.owner_id]
        logger.debug('Removed short link.', extra={'slug': record.slug, 'ownerId': str(record.owner_id)})
