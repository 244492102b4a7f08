"""Utility functions for application configuration management.

Configuration is read from environment variables:

    SHORTENER_DOMAIN            – Authority (host[:port]) of short URLs. Required.
    SHORTENER_SALT              – Salt for alias generation (default: "default_salt").
    SHORTENER_SHORTCODE_LENGTH  – Alias length, at least 6 (default: 7).

Functions:
    validate_domain(domain: str) -> str
        Return the lowercased domain, or raise BadConfigurationError.

    shortcode_length() -> int
        Return the configured alias length.

    load_config() -> ShortenerConfig
        Load and validate the complete shortener configuration.

Example:
    >>> os.environ['SHORTENER_DOMAIN'] = 'short.ly'
    >>> config = load_config()
    >>> config.domain
    'short.ly'
    >>> config.shortcode_length
    7
"""

import os
import logging
from dataclasses import dataclass

from urlshortener.constants import ENV, Default, MIN_SHORTCODE_LENGTH
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.helpers import require_environment


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortenerConfig:
    domain: str
    salt: str = Default.SALT
    shortcode_length: int = Default.SHORTCODE_LENGTH


def validate_domain(domain: str) -> str:
    """Validate a configured shortener domain

    Args:
        domain (str): authority component, e.g. 'short.ly' or 'localhost:3000'

    Returns:
        str: lowercased domain

    Raises:
        BadConfigurationError: If domain is empty or contains '/' or whitespace.
    """
    if not domain or '/' in domain or any(c.isspace() for c in domain):
        raise BadConfigurationError(f'Invalid shortener domain (given value: {domain!r}).')
    return domain.lower()


def validate_salt(salt: str) -> str:
    if not salt:
        raise BadConfigurationError('Alias generation salt must be a non-empty string.')
    return salt


def validate_shortcode_length(length: int) -> int:
    if length < MIN_SHORTCODE_LENGTH:
        raise BadConfigurationError(f'Alias length must be at least {MIN_SHORTCODE_LENGTH} (given value: {length}).')
    return length


def shortcode_length() -> int:
    raw = os.environ.get(ENV.Shortener.SHORTCODE_LENGTH)
    if not raw:
        return Default.SHORTCODE_LENGTH
    try:
        length = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'{ENV.Shortener.SHORTCODE_LENGTH} must be an integer (given value: {raw!r}).') from e
    return validate_shortcode_length(length)


@require_environment(ENV.Shortener.DOMAIN)
def load_config() -> ShortenerConfig:
    """Load shortener configuration from the environment

    Returns:
        ShortenerConfig: validated configuration

    Raises:
        MissingEnvironmentVariableError: If SHORTENER_DOMAIN is missing or empty.
        BadConfigurationError: If any value is invalid.
    """
    config = ShortenerConfig(
        domain=validate_domain(os.environ[ENV.Shortener.DOMAIN]),
        salt=validate_salt(os.environ.get(ENV.Shortener.SALT, Default.SALT)),
        shortcode_length=shortcode_length(),
    )
    logger.debug(
        'Loaded shortener configuration.',
        extra={'domain': config.domain, 'shortcodeLength': config.shortcode_length},
    )
    return config
