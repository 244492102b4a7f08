"""Lexical URL helpers

All checks here are purely lexical. A URL is split on '/' and its segments
are interpreted positionally:

    'http://short.ly/Gh71WPT'.split('/')
    ['http:', '', 'short.ly', 'Gh71WPT']
      scheme      authority   alias

Functions:
    is_valid_url(url) -> bool
        True for http(s) URLs with a non-empty, dotted authority.
    url_scheme(url) -> str
        Lowercased scheme segment including the colon, e.g. 'https:'.
    url_authority(url) -> str
        Third '/'-delimited segment (host[:port]), '' when absent.
    url_alias(url) -> str
        Fourth '/'-delimited segment, '' when absent.
    is_same_origin(url, domain) -> bool
        True if the lowercased authority equals `domain` exactly.
"""

from urlshortener.constants import ALLOWED_SCHEMES


def _segment(url: str, index: int) -> str:
    segments = url.split('/')
    return segments[index] if len(segments) > index else ''


def is_valid_url(url: str) -> bool:
    """Check that url starts with http:// or https:// and has a dotted authority.

    Example:
        >>> is_valid_url('HTTPS://example.com/a')
        True
        >>> is_valid_url('short.ly/bad')
        False
        >>> is_valid_url('http://localhost/a')
        False
    """
    if not url.lower().startswith(ALLOWED_SCHEMES):
        return False
    authority = url_authority(url)
    return bool(authority) and '.' in authority


def url_scheme(url: str) -> str:
    return _segment(url, 0).lower()


def url_authority(url: str) -> str:
    return _segment(url, 2)


def url_alias(url: str) -> str:
    return _segment(url, 3)


def is_same_origin(url: str, domain: str) -> bool:
    """Check whether url is a short URL of the store configured with `domain`.

    No port normalization and no trailing-slash tolerance is applied.

    Example:
        >>> is_same_origin('http://SHORT.ly/abc', 'short.ly')
        True
        >>> is_same_origin('http://short.ly:80/abc', 'short.ly')
        False
    """
    return url_authority(url).lower() == domain
