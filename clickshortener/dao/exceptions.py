"""Exceptions related to Data Access Objects (DAO) operations.

State errors raised by the link DAO carry the affected record (when there is
one), so callers can notify its owner without a second lookup.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkNotFoundError:
        Raised when a LinkRecord is not found in the data store.

    LinkAlreadyExistsError:
        Raised when attempting to insert a LinkRecord whose slug is taken.

    LinkExpiredError:
        Raised when a LinkRecord outlived its TTL. The record has been evicted.

    LinkLimitExhaustedError:
        Raised when a LinkRecord has no clicks left.

    LinkForbiddenError:
        Raised when a non-owner attempts to delete a LinkRecord.

    SlugExhaustedError:
        Raised when no free slug was found within the allowed attempts.

Example:
    >>> from clickshortener.dao.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError("Short link with code 'abc12345' not found.")
    Traceback (most recent call last):
        ...
    clickshortener.dao.exceptions.LinkNotFoundError: Short link with code 'abc12345' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'

    def __init__(self, message: str = '', record=None):
        super().__init__(message)
        self.record = record


class LinkNotFoundError(DAOError):
    """Exception raised when a LinkRecord is not found in the data store."""

    error_code = 'NotFound'


class LinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a LinkRecord that already exists in the data store."""

    error_code = 'dao:link_already_exists'


class LinkExpiredError(DAOError):
    """Exception raised when a LinkRecord is past its expiry. The record is gone once this is raised."""

    error_code = 'Expired'


class LinkLimitExhaustedError(DAOError):
    """Exception raised when a LinkRecord's click budget is used up."""

    error_code = 'LimitExhausted'


class LinkForbiddenError(DAOError):
    """Exception raised when a LinkRecord is modified by someone other than its owner."""

    error_code = 'Forbidden'


class SlugExhaustedError(DAOError):
    """Exception raised when slug generation keeps colliding with existing records."""

    error_code = 'dao:slug_exhausted'
