class GoLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:golinks_error'


class ConfigurationError(GoLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the store is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
