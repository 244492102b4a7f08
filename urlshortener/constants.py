from enum import StrEnum


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        DOMAIN = 'SHORTENER_DOMAIN'
        SALT = 'SHORTENER_SALT'  # noqa: S105
        SHORTCODE_LENGTH = 'SHORTENER_SHORTCODE_LENGTH'


class Default:
    """Default configuration values."""

    SALT = 'default_salt'  # noqa: S105
    SHORTCODE_LENGTH = 7
    LOG_LEVEL = 'INFO'


# Shortest alias length accepted; 62**6 aliases before the counter wraps
MIN_SHORTCODE_LENGTH = 6

# Number of fresh counter values tried before giving up on alias allocation
MAX_ALIAS_ATTEMPTS = 5

# URL schemes accepted by the lexical syntax check
ALLOWED_SCHEMES = ('http://', 'https://')


class ErrorCode(StrEnum):
    """Machine-readable codes carried by failed results."""

    URL_SYNTAX = 'URL_SYNTAX'
    DOMAIN = 'DOMAIN'
    NOT_FOUND = 'NOT_FOUND'


class LogEvent(StrEnum):
    """Values of the `event` field attached to structured log records."""

    ASSOCIATION_CREATED = 'ASSOCIATION_CREATED'
    ASSOCIATION_REACTIVATED = 'ASSOCIATION_REACTIVATED'
    ASSOCIATION_DEACTIVATED = 'ASSOCIATION_DEACTIVATED'
    ALIAS_COLLISION = 'ALIAS_COLLISION'
    URL_RESOLVED = 'URL_RESOLVED'
    URL_REJECTED = 'URL_REJECTED'
    ASSOCIATION_NOT_FOUND = 'ASSOCIATION_NOT_FOUND'
