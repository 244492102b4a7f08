from urlshortener.utils.config import ShortenerConfig, load_config, validate_domain
from urlshortener.utils.helpers import get_short_url, require_environment
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.logging import initialize_logging
from urlshortener.utils.urls import is_valid_url, is_same_origin, url_alias, url_authority, url_scheme


__all__ = [
    'generate_shortcode',
    'ShortenerConfig',
    'load_config',
    'validate_domain',
    'get_short_url',
    'require_environment',
    'initialize_logging',
    'is_valid_url',
    'is_same_origin',
    'url_alias',
    'url_authority',
    'url_scheme',
]
