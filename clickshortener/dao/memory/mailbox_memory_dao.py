"""In-memory per-owner notification mailbox.

Each owner gets a FIFO queue created on first notification. Reading is
destructive: `drain()` hands back an owned list and leaves the queue empty.

NOTE: queues are unbounded. An owner who never drains, or a link opened many
      times after its limit is exhausted, grows the queue without limit.
"""

import logging
import threading
from collections import deque
from datetime import datetime
from uuid import UUID

from beartype import beartype

from clickshortener.models import Notification
from clickshortener.dao.base import MailboxBaseDAO
from clickshortener.dao.memory.helpers import synchronized
from clickshortener.utils.helpers import utcnow


logger = logging.getLogger(__name__)


class MailboxMemoryDAO(MailboxBaseDAO):
    def __init__(self):
        self._queues: dict[UUID, deque[Notification]] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return '<MailboxMemoryDAO>'

    @synchronized
    @beartype
    def notify(self, owner_id: UUID, message: str, timestamp: datetime | None = None) -> Notification:
        notification = Notification(timestamp=timestamp or utcnow(), message=message)
        self._queues.setdefault(owner_id, deque()).append(notification)
        logger.info(message, extra={'ownerId': str(owner_id)})
        return notification

    @synchronized
    @beartype
    def drain(self, owner_id: UUID) -> list[Notification]:
        queue = self._queues.pop(owner_id, None)
        return list(queue) if queue else []

    @synchronized
    @beartype
    def pending(self, owner_id: UUID) -> int:
        return len(self._queues.get(owner_id, ()))
