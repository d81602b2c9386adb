class ClickShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:clickshortener_error'


class ConfigurationError(ClickShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class ValidationError(ClickShortenerError):
    """Base exception for rejected client input."""

    error_code = 'input:validation_error'


class InvalidURLError(ValidationError):
    """Raised when a target URL is malformed or not absolute."""

    error_code = 'InvalidURL'


class InvalidLimitError(ValidationError):
    """Raised when a click limit is not a positive integer."""

    error_code = 'InvalidLimit'


class UnknownOptionError(ValidationError):
    """Raised when a create request carries an unrecognized option."""

    error_code = 'UnknownOption'


class InvalidIdentityError(ValidationError):
    """Raised when an owner identity is not a valid UUID."""

    error_code = 'InvalidIdentity'


class MissingArgumentError(ValidationError):
    """Raised when a request lacks a required argument."""

    error_code = 'MissingArgument'
