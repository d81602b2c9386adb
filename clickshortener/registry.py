"""Link registry: the operations callers run against short links

The registry coordinates three collaborators, all injected:

    - a link DAO (records + owner index, atomic per-slug transitions);
    - a mailbox DAO (per-owner notifications);
    - a slug factory (random identifiers, retried on collision).

It adds input validation, the TTL policy and the notification side-channel
on top of the DAO's storage transitions:

    - expiry detected on access or by the sweeper  -> "expired" notification;
    - a click that brings the budget to exactly 0  -> "limit" notification;
    - every click attempt on an exhausted budget    -> "limit" notification.

Example:
    >>> registry = LinkRegistry(LinkMemoryDAO(), MailboxMemoryDAO(), ttl=timedelta(days=1))
    >>> link = registry.create(owner_id, 'https://example.com', max_clicks=1)
    >>> registry.consume(link.slug).target
    'https://example.com'
    >>> registry.consume(link.slug)
    Traceback (most recent call last):
        ...
    clickshortener.dao.exceptions.LinkLimitExhaustedError: Short link with code '...' has no clicks left.
"""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from clickshortener.constants import Slug
from clickshortener.models import LinkRecord, Notification
from clickshortener.types import Clock, SlugFactory
from clickshortener.dao.base import LinkBaseDAO, MailboxBaseDAO
from clickshortener.dao.exceptions import (
    LinkAlreadyExistsError,
    LinkExpiredError,
    LinkLimitExhaustedError,
    SlugExhaustedError,
)
from clickshortener.exceptions import InvalidLimitError
from clickshortener.utils.helpers import get_short_url, parse_owner_id, utcnow, validate_target_url
from clickshortener.utils.shortener import generate_slug


logger = logging.getLogger(__name__)

EXPIRED_MESSAGE = 'Your link {short_url} has expired and was removed.'
LIMIT_EXHAUSTED_MESSAGE = 'Click limit for link {short_url} is exhausted.'


class LinkRegistry:
    """Create, open, list and delete short links

    Attributes:
        links (LinkBaseDAO):
            Storage for records and the owner index.
        mailbox (MailboxBaseDAO):
            Storage for owner notifications.
        ttl (timedelta):
            Lifetime given to every new link.
    """

    def __init__(
        self,
        links: LinkBaseDAO,
        mailbox: MailboxBaseDAO,
        ttl: timedelta,
        slug_factory: SlugFactory = generate_slug,
        clock: Clock = utcnow,
        max_slug_attempts: int = Slug.MAX_ATTEMPTS,
    ):
        if ttl <= timedelta(0):
            raise ValueError(f'TTL must be positive (given value: {ttl}).')

        self.links = links
        self.mailbox = mailbox
        self.ttl = ttl
        self._slug_factory = slug_factory
        self._clock = clock
        self._max_slug_attempts = max_slug_attempts

    def now(self) -> datetime:
        return self._clock()

    def create(self, owner_id: UUID | str, target: str, max_clicks: int | None = None) -> LinkRecord:
        """Shorten `target` on behalf of `owner_id`

        Slugs are drawn from the slug factory and inserted with the DAO's
        insert-if-absent primitive. A collision simply draws again, so two
        concurrent creates can never end up sharing a slug.

        Args:
            owner_id (UUID | str):
                Identity of the creator.
            target (str):
                Absolute URL (scheme + host) to redirect to.
            max_clicks (int | None):
                Click budget, at least 1. None means unlimited.

        Returns:
            LinkRecord: the stored record.

        Raises:
            InvalidIdentityError: if `owner_id` is not a UUID.
            InvalidURLError: if `target` is not an absolute URL.
            InvalidLimitError: if `max_clicks` is not an integer >= 1.
            SlugExhaustedError: if every attempt collided.
        """
        owner_id = parse_owner_id(owner_id)
        validate_target_url(target)
        if max_clicks is not None and (isinstance(max_clicks, bool) or not isinstance(max_clicks, int) or max_clicks < 1):
            raise InvalidLimitError(f'Click limit must be an integer >= 1 (given value: {max_clicks!r}).')

        for attempt in range(1, self._max_slug_attempts + 1):
            record = LinkRecord.new(
                slug=self._slug_factory(),
                target=target,
                owner_id=owner_id,
                max_clicks=max_clicks,
                created_at=self._clock(),
                ttl=self.ttl,
            )
            try:
                self.links.insert(record)
            except LinkAlreadyExistsError:
                logger.debug('Slug collision, drawing again.', extra={'slug': record.slug, 'attempt': attempt})
                continue

            logger.info(
                'Short link created.',
                extra={'slug': record.slug, 'ownerId': str(owner_id), 'maxClicks': str(record.max_clicks)},
            )
            return record

        raise SlugExhaustedError(f'No free slug found after {self._max_slug_attempts} attempts.')

    def resolve(self, slug: str) -> LinkRecord:
        """Look up a link without spending a click

        Expiry is checked lazily: an expired record is evicted on the spot,
        its owner is notified, and LinkExpiredError is raised.

        Raises:
            LinkNotFoundError: if the slug is unknown.
            LinkExpiredError: if the link outlived its TTL.
        """
        try:
            return self.links.get(slug, now=self._clock())
        except LinkExpiredError as e:
            self._notify_expired(e.record)
            raise

    def consume(self, slug: str) -> LinkRecord:
        """Spend one click of a link and return the updated record

        The returned record's `target` is where the caller should be sent.

        Raises:
            LinkNotFoundError: if the slug is unknown.
            LinkExpiredError: if the link outlived its TTL (it is evicted).
            LinkLimitExhaustedError: if no clicks are left (the owner is notified on every attempt).
        """
        try:
            record = self.links.hit(slug, now=self._clock())
        except LinkExpiredError as e:
            self._notify_expired(e.record)
            raise
        except LinkLimitExhaustedError as e:
            self._notify_limit_exhausted(e.record)
            raise

        logger.debug('Short link consumed.', extra={'slug': slug, 'remainingClicks': str(record.remaining_clicks)})
        if record.remaining_clicks.is_exhausted:
            self._notify_limit_exhausted(record)
        return record

    def delete(self, slug: str, requester: UUID | str) -> LinkRecord:
        """Delete a link on behalf of its owner

        Raises:
            InvalidIdentityError: if `requester` is not a UUID.
            LinkNotFoundError: if the slug is unknown.
            LinkForbiddenError: if `requester` is not the owner.
        """
        record = self.links.delete(slug, requester=parse_owner_id(requester))
        logger.info('Short link deleted by owner.', extra={'slug': slug, 'ownerId': str(record.owner_id)})
        return record

    def list_by_owner(self, owner_id: UUID | str) -> list[LinkRecord]:
        return self.links.list_by_owner(parse_owner_id(owner_id))

    def evict_expired(self, now: datetime | None = None) -> list[LinkRecord]:
        """Remove every link whose expiry is strictly before `now`

        Acts as system authority (no ownership check). The scan is a snapshot;
        each removal is atomic on its own, and a link deleted concurrently by
        its owner (or already evicted on access) is skipped.

        Returns:
            list[LinkRecord]: the evicted records, one notification sent for each.
        """
        now = now or self._clock()
        evicted = []
        for candidate in self.links.expired(now):
            record = self.links.evict(candidate.slug, now=now)
            if record is None:
                continue
            self._notify_expired(record)
            evicted.append(record)
        return evicted

    def notifications(self, owner_id: UUID | str) -> list[Notification]:
        return self.mailbox.drain(parse_owner_id(owner_id))

    def _notify_expired(self, record: LinkRecord) -> None:
        self.mailbox.notify(record.owner_id, EXPIRED_MESSAGE.format(short_url=get_short_url(record.slug)))

    def _notify_limit_exhausted(self, record: LinkRecord) -> None:
        self.mailbox.notify(record.owner_id, LIMIT_EXHAUSTED_MESSAGE.format(short_url=get_short_url(record.slug)))
