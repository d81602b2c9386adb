"""Abstract base class for link data access objects (DAOs).

This class establishes a consistent contract for link registry implementations.
A registry owns two structures which must never disagree: the slug -> record
map and the owner -> slugs index. Every mutation touches both as one unit.

Responsibilities:
    - Insert records with an atomic insert-if-absent on the slug.
    - Evaluate a click (expiry check, limit check, decrement) as one transition.
    - Remove records for their owner or for the system (expiry).
    - Provide snapshot views by owner and by expiry.

Example:
    Typical usage with an implementation:

        >>> from clickshortener.dao.memory import LinkMemoryDAO
        >>> dao = LinkMemoryDAO()
        >>> dao.insert(record)
        <LinkMemoryDAO>
        >>> dao.hit(record.slug, now=utcnow()).remaining_clicks
        Limited(count=2)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from clickshortener.models import LinkRecord


class LinkBaseDAO(ABC):
    """Interface for link data access objects (DAOs).

    Methods:
        insert(record: LinkRecord) -> LinkBaseDAO:
            Insert a record unless its slug is taken.
            Raises LinkAlreadyExistsError if the slug already exists.

        get(slug: str, now: datetime | None = None) -> LinkRecord:
            Retrieve a record by slug without click accounting.
            Raises LinkNotFoundError if the slug does not exist.
            Raises LinkExpiredError (after evicting it) if `now` is past its expiry.

        hit(slug: str, now: datetime) -> LinkRecord:
            Consume one click and return the updated record.
            Raises LinkNotFoundError, LinkExpiredError or LinkLimitExhaustedError.

        delete(slug: str, requester: UUID | None = None) -> LinkRecord:
            Remove a record and return it. `requester=None` acts as the system.
            Raises LinkNotFoundError or LinkForbiddenError.

        evict(slug: str, now: datetime) -> LinkRecord | None:
            Remove a record only if its expiry is strictly before `now`.

        list_by_owner(owner_id: UUID) -> list[LinkRecord]:
            Snapshot of the owner's records, oldest first.

        expired(now: datetime) -> list[LinkRecord]:
            Snapshot of all records whose expiry is strictly before `now`.

        count() -> int:
            Number of stored records.

    Subclassing:
        Implementations must extend this class and implement all abstract methods.
    """

    @abstractmethod
    def insert(self, record: LinkRecord) -> 'LinkBaseDAO':
        """Insert a new record into the registry.

        Args:
            record (LinkRecord):
                The record to be inserted.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If a record with the same slug already exists.
        """
        pass

    @abstractmethod
    def get(self, slug: str, now: datetime | None = None) -> LinkRecord:
        """Retrieve a record by its slug.

        Args:
            slug (str):
                The slug of the record to be retrieved.

            now (datetime | None):
                When given, an expired record is evicted instead of returned.

        Returns:
            LinkRecord: the stored record.

        Raises:
            LinkNotFoundError:
                If no record with the given slug exists.

            LinkExpiredError:
                If `now` is past the record's expiry. The record is evicted.
        """
        pass

    @abstractmethod
    def hit(self, slug: str, now: datetime) -> LinkRecord:
        """Consume one click of a record.

        The whole sequence (lookup, expiry check, limit check, decrement) is
        a single transition per slug. Concurrent hits never decrement past 0.

        Args:
            slug (str):
                The slug being opened.

            now (datetime):
                The moment of the click.

        Returns:
            LinkRecord: the record after the click.

        Raises:
            LinkNotFoundError:
                If no record with the given slug exists.

            LinkExpiredError:
                If the record is past its expiry. The record is evicted.

            LinkLimitExhaustedError:
                If the record has no clicks left. Nothing changes.
        """
        pass

    @abstractmethod
    def delete(self, slug: str, requester: UUID | None = None) -> LinkRecord:
        """Remove a record from the registry and the owner index.

        Args:
            slug (str):
                The slug of the record to be removed.

            requester (UUID | None):
                Identity asking for the removal. None means system authority.

        Returns:
            LinkRecord: the removed record.

        Raises:
            LinkNotFoundError:
                If no record with the given slug exists.

            LinkForbiddenError:
                If the requester does not own the record. Nothing changes.
        """
        pass

    @abstractmethod
    def evict(self, slug: str, now: datetime) -> LinkRecord | None:
        """Remove a record on behalf of the system if it expired before `now`.

        Returns:
            LinkRecord | None: the removed record, or None if it is gone or still live.
        """
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: UUID) -> list[LinkRecord]:
        pass

    @abstractmethod
    def expired(self, now: datetime) -> list[LinkRecord]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
