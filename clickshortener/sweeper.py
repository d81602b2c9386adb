"""Expiration sweeper: periodic background eviction of expired links

The sweeper runs on its own daemon thread. After `initial_delay` seconds it
calls `run_once()` every `interval` seconds until stopped. Each run evicts
every link whose expiry is strictly before the moment the run started and
notifies each owner once.

A run that raises is logged and the schedule carries on. Stopping sets an
event the thread waits on, so a sleeping sweeper wakes up immediately; a run
already in progress finishes first (each eviction is atomic, so abandoning
it would be safe as well).

Example:
    >>> sweeper = ExpirationSweeper(registry, interval=30, initial_delay=10)
    >>> sweeper.start()
    >>> ...
    >>> sweeper.stop()
"""

import logging
import threading

from clickshortener.constants import Sweep
from clickshortener.models import LinkRecord
from clickshortener.registry import LinkRegistry


logger = logging.getLogger(__name__)


class ExpirationSweeper:
    """Cancellable periodic job evicting expired links

    Attributes:
        registry (LinkRegistry):
            Registry whose expired links are evicted.
        interval (float):
            Seconds between two runs.
        initial_delay (float):
            Seconds before the first run.
    """

    def __init__(
        self,
        registry: LinkRegistry,
        interval: float = Sweep.INTERVAL,
        initial_delay: float = Sweep.INITIAL_DELAY,
        name: str = 'link-sweeper',
    ):
        if interval <= 0:
            raise ValueError(f'Sweep interval must be positive (given value: {interval}).')
        if initial_delay < 0:
            raise ValueError(f'Initial delay must be non-negative (given value: {initial_delay}).')

        self.registry = registry
        self.interval = interval
        self.initial_delay = initial_delay
        self._name = name
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._start_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> 'ExpirationSweeper':
        """Start the schedule. Calling it on a running sweeper does nothing."""
        with self._start_lock:
            if self.running:
                return self

            self._stopped.clear()
            self._thread = threading.Thread(target=self._loop, name=self._name, daemon=True)
            self._thread.start()
            logger.debug('Sweeper started.', extra={'interval': self.interval, 'initialDelay': self.initial_delay})
        return self

    def stop(self, timeout: float | None = None) -> None:
        """Cancel the schedule and wait up to `timeout` seconds for the thread to exit"""
        with self._start_lock:
            self._stopped.set()
            thread = self._thread

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug('Sweeper stopped.')

    def run_once(self) -> list[LinkRecord]:
        """Evict every link that expired before now

        Returns:
            list[LinkRecord]: evicted records, empty when nothing had expired.
        """
        evicted = self.registry.evict_expired()
        if evicted:
            logger.info('Expired links evicted.', extra={'evicted': len(evicted)})
        return evicted

    def _loop(self) -> None:
        if self._stopped.wait(self.initial_delay):
            return

        while True:
            try:
                self.run_once()
            except Exception:
                logger.exception('Sweeper run failed. Retrying on next schedule.')

            if self._stopped.wait(self.interval):
                return
