"""Helper utilities.

Functions:
    get_short_url(scheme: str, domain: str, alias: str) -> str
        Compose the string representation of a short URL
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
"""

import os
import functools
from collections.abc import Callable

from urlshortener.exceptions import MissingEnvironmentVariableError


def get_short_url(scheme: str, domain: str, alias: str) -> str:
    """Get string representation of a short URL

    Args:
        scheme (str): scheme segment including the colon (e.g. 'https:')
        domain (str): configured shortener domain
        alias (str): alias of the association

    Returns:
        str: short url string representation

    Example:
        >>> get_short_url('https:', 'short.ly', 'Gh71WPT')
        'https://short.ly/Gh71WPT'
    """
    return f'{scheme}//{domain}/{alias}'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('SHORTENER_DOMAIN')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'SHORTENER_DOMAIN'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
