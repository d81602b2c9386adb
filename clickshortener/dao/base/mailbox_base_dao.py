from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from clickshortener.models import Notification


class MailboxBaseDAO(ABC):
    """Interface for per-owner notification mailboxes.

    Methods:
        notify(owner_id: UUID, message: str, timestamp: datetime | None = None) -> Notification:
            Append a message to the owner's queue, creating the queue if needed.

        drain(owner_id: UUID) -> list[Notification]:
            Return every queued message in FIFO order and empty the queue.

        pending(owner_id: UUID) -> int:
            Number of queued messages, without draining.
    """

    @abstractmethod
    def notify(self, owner_id: UUID, message: str, timestamp: datetime | None = None) -> Notification:
        pass

    @abstractmethod
    def drain(self, owner_id: UUID) -> list[Notification]:
        pass

    @abstractmethod
    def pending(self, owner_id: UUID) -> int:
        pass
