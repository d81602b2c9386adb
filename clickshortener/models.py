"""Domain models of the link registry.

Classes:
    Unlimited, Limited:
        The two shapes of a click budget. `ClickLimit` is their union.
    LinkRecord:
        A shortened link and its lifecycle metadata.
    Notification:
        A message left in an owner's mailbox.

Example:
    >>> from datetime import datetime, timedelta, UTC
    >>> from uuid import uuid4
    >>> now = datetime.now(UTC)
    >>> link = LinkRecord.new(
    ...     slug='Ab9ZxQ1k',
    ...     target='https://example.com',
    ...     owner_id=uuid4(),
    ...     max_clicks=3,
    ...     created_at=now,
    ...     ttl=timedelta(days=1),
    ... )
    >>> link.remaining_clicks
    Limited(count=3)
    >>> link.clicked().remaining_clicks
    Limited(count=2)
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from uuid import UUID

from clickshortener.constants import UNLIMITED_DISPLAY


@dataclass(frozen=True)
class Unlimited:
    """Click budget without an upper bound."""

    @property
    def is_exhausted(self) -> bool:
        return False

    def decremented(self) -> 'Unlimited':
        return self

    def __str__(self) -> str:
        return UNLIMITED_DISPLAY


@dataclass(frozen=True)
class Limited:
    """Click budget with `count` clicks."""

    count: int

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f'Click count must be of type integer (given type: {type(self.count)}).')
        if self.count < 0:
            raise ValueError(f'Click count must be a non-negative integer (given value: {self.count}).')

    @property
    def is_exhausted(self) -> bool:
        return self.count <= 0

    def decremented(self) -> 'Limited':
        return Limited(self.count - 1)

    def __str__(self) -> str:
        return str(self.count)


type ClickLimit = Unlimited | Limited

UNLIMITED = Unlimited()


def click_limit(max_clicks: int | None) -> Unlimited | Limited:
    """Return the click budget for an optional maximum (None means unlimited)"""
    return UNLIMITED if max_clicks is None else Limited(max_clicks)


# fmt: off
@dataclass(frozen=True)
class LinkRecord:
    slug: str                        # Unique short identifier
    target: str                      # Absolute URL the link redirects to
    owner_id: UUID                   # Identity of the creator, the only one allowed to delete
    max_clicks: ClickLimit           # Click budget at creation
    remaining_clicks: ClickLimit     # Clicks left, decremented on each successful consumption
    created_at: datetime             # Creation moment (UTC)
    expires_at: datetime             # created_at + TTL, after which this record is expired
# fmt: on

    def __post_init__(self):
        if type(self.max_clicks) is not type(self.remaining_clicks):
            raise ValueError('Remaining clicks must have the same kind of limit as max clicks.')
        if isinstance(self.max_clicks, Limited) and self.remaining_clicks.count > self.max_clicks.count:
            raise ValueError(
                f'Remaining clicks ({self.remaining_clicks.count}) exceed max clicks ({self.max_clicks.count}).'
            )
        if self.expires_at <= self.created_at:
            raise ValueError('Expiry must be later than creation.')

    @classmethod
    def new(
        cls,
        slug: str,
        target: str,
        owner_id: UUID,
        max_clicks: int | None,
        created_at: datetime,
        ttl: timedelta,
    ) -> 'LinkRecord':
        limit = click_limit(max_clicks)
        return cls(
            slug=slug,
            target=target,
            owner_id=owner_id,
            max_clicks=limit,
            remaining_clicks=limit,
            created_at=created_at,
            expires_at=created_at + ttl,
        )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def clicked(self) -> 'LinkRecord':
        """Return a copy with one click consumed"""
        return replace(self, remaining_clicks=self.remaining_clicks.decremented())


@dataclass(frozen=True)
class Notification:
    timestamp: datetime
    message: str
