"""Lifecycle owner of the shortener's in-memory state

`ShortenerApp` builds and owns every stateful piece: the link DAO, the
mailbox DAO, the registry on top of them and the expiration sweeper. The
sweeper is started on construction and cancelled by `shutdown()` (or on
leaving a `with` block). Nothing is kept in module globals; two apps never
share state.

Example:
    >>> with ShortenerApp.from_environment() as app:
    ...     link = app.registry.create(uuid4(), 'https://example.com', max_clicks=3)
    ...     app.registry.consume(link.slug).target
    'https://example.com'
"""

import logging

from clickshortener.constants import Sweep
from clickshortener.dao.base import LinkBaseDAO, MailboxBaseDAO
from clickshortener.dao.memory import LinkMemoryDAO, MailboxMemoryDAO
from clickshortener.registry import LinkRegistry
from clickshortener.sweeper import ExpirationSweeper
from clickshortener.types import Clock, SlugFactory
from clickshortener.utils.config import ShortenerConfig, load_config
from clickshortener.utils.helpers import utcnow
from clickshortener.utils.logging import initialize_logging
from clickshortener.utils.shortener import generate_slug


logger = logging.getLogger(__name__)


class ShortenerApp:
    def __init__(
        self,
        config: ShortenerConfig | None = None,
        *,
        links: LinkBaseDAO | None = None,
        mailbox: MailboxBaseDAO | None = None,
        slug_factory: SlugFactory = generate_slug,
        clock: Clock = utcnow,
        sweep_interval: float = Sweep.INTERVAL,
        sweep_initial_delay: float = Sweep.INITIAL_DELAY,
        start_sweeper: bool = True,
    ):
        self.config = config or load_config()
        self.links = links if links is not None else LinkMemoryDAO()
        self.mailbox = mailbox if mailbox is not None else MailboxMemoryDAO()
        self.registry = LinkRegistry(
            self.links,
            self.mailbox,
            ttl=self.config.ttl,
            slug_factory=slug_factory,
            clock=clock,
        )
        self.sweeper = ExpirationSweeper(self.registry, interval=sweep_interval, initial_delay=sweep_initial_delay)

        logger.info(
            'Shortener started.',
            extra={'appEnv': self.config.app_env, 'ttlSeconds': int(self.config.ttl.total_seconds())},
        )
        if start_sweeper:
            self.sweeper.start()

    @classmethod
    def from_environment(cls, **kwargs) -> 'ShortenerApp':
        """Load configuration from the environment, set up logging, and build an app"""
        config = load_config()
        initialize_logging(config.log_level)
        return cls(config, **kwargs)

    def shutdown(self, timeout: float | None = 5.0) -> None:
        self.sweeper.stop(timeout)
        logger.info('Shortener stopped.')

    def __enter__(self) -> 'ShortenerApp':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()
