"""Shortener store: long URL to alias associations under one configured domain

Every public operation returns a ResultModel. Expected failures (bad URL
syntax, wrong domain, unknown association) are returned as data and never
raised.

Error codes:
    URL_SYNTAX: URL does not start with http:// or https://, or its authority
                is empty or has no '.'.
    DOMAIN:     add() got a short URL of this store, or query() got a URL of
                another domain.
    NOT_FOUND:  no association (or, for query(), no active association) matches.

Associations are never deleted. remove() deactivates; a later add() of the
same long URL reactivates the association under its original alias, with its
hit count preserved.

The store is not synchronized. add() and query() are check-then-act
sequences, so concurrent callers must serialize access externally.

Example:
    >>> store = ShortenerStore('short.ly')
    >>> short_url = store.add('http://example.com/a').value
    >>> store.query(short_url).to_dict()
    {'value': 'http://example.com/a'}
    >>> store.remove('http://example.com/a').to_dict()
    {}
    >>> store.query(short_url).error.code
    <ErrorCode.NOT_FOUND: 'NOT_FOUND'>
    >>> store.count('http://example.com/a').to_dict()
    {'value': 1}
"""

import logging
from dataclasses import replace

from beartype import beartype

from urlshortener.constants import Default, ErrorCode, LogEvent, MAX_ALIAS_ATTEMPTS
from urlshortener.models import AssociationModel, ResultModel
from urlshortener.dao.base import AssociationBaseDAO
from urlshortener.dao.memory import AssociationMemoryDAO
from urlshortener.dao.exceptions import AliasAlreadyExistsError, AssociationNotFoundError
from urlshortener.utils.config import ShortenerConfig, load_config, validate_domain, validate_salt, validate_shortcode_length
from urlshortener.utils.helpers import get_short_url
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.urls import is_valid_url, is_same_origin, url_alias, url_scheme


logger = logging.getLogger(__name__)


class ShortenerStore:
    """Map long URLs to aliases under a single configured domain

    Attributes:
        domain (str):
            Lowercased authority (host[:port]) embedded in every short URL and
            used to recognize short URLs of this store.
        salt (str):
            Salt for alias generation.
        shortcode_length (int):
            Length of generated aliases.
        dao (AssociationBaseDAO):
            Exclusively owned association storage.
    """

    def __init__(
        self,
        domain: str,
        salt: str = Default.SALT,
        shortcode_length: int = Default.SHORTCODE_LENGTH,
        dao: AssociationBaseDAO | None = None,
    ):
        self.domain = validate_domain(domain)
        self.salt = validate_salt(salt)
        self.shortcode_length = validate_shortcode_length(shortcode_length)
        self.dao = dao if dao is not None else AssociationMemoryDAO()

    @classmethod
    def from_config(cls, config: ShortenerConfig) -> 'ShortenerStore':
        return cls(config.domain, salt=config.salt, shortcode_length=config.shortcode_length)

    @classmethod
    def from_environment(cls) -> 'ShortenerStore':
        """Build a store from SHORTENER_* environment variables (see utils.config)."""
        return cls.from_config(load_config())

    def __len__(self) -> int:
        return len(self.dao)

    @beartype
    def add(self, long_url: str) -> ResultModel:
        """Associate long_url with an alias and return its short URL

        Re-adding a known long URL (active or not) reactivates it and returns
        its existing alias. The returned short URL always uses the scheme of
        the submitted long_url, which may differ from the scheme used when the
        association was first created.

        Returns:
            ResultModel: value is '<scheme>//<domain>/<alias>'.
                Fails with URL_SYNTAX or DOMAIN.
        """
        # 1- Validate input
        if not is_valid_url(long_url):
            return self._url_syntax_error(long_url)
        if is_same_origin(long_url, self.domain):
            logger.debug('Refusing to shorten a short URL.', extra={'url': long_url, 'event': LogEvent.URL_REJECTED})
            return ResultModel.failure(ErrorCode.DOMAIN, f'long url {long_url} has the shortener domain {self.domain}')

        folded_url = long_url.lower()
        scheme = url_scheme(long_url)

        # 2- Reactivate an existing association
        try:
            association = self.dao.find(folded_url)
        except AssociationNotFoundError:
            pass
        else:
            if not association.active:
                self.dao.update(replace(association, active=True))
                logger.info(
                    'Reactivated association.',
                    extra={'alias': association.alias, 'event': LogEvent.ASSOCIATION_REACTIVATED},
                )
            return ResultModel.success(get_short_url(scheme, self.domain, association.alias))

        # 3- Create a new association
        association = self._insert(folded_url)
        logger.info(
            'Created association.',
            extra={'alias': association.alias, 'event': LogEvent.ASSOCIATION_CREATED},
        )
        return ResultModel.success(get_short_url(scheme, self.domain, association.alias))

    @beartype
    def query(self, short_url: str) -> ResultModel:
        """Resolve short_url to its long URL and count the hit

        Returns:
            ResultModel: value is the stored (case-folded) long URL.
                Fails with URL_SYNTAX, DOMAIN or NOT_FOUND (unknown or inactive).
        """
        if not is_valid_url(short_url):
            return self._url_syntax_error(short_url)
        if not is_same_origin(short_url, self.domain):
            logger.debug('Refusing to resolve a foreign URL.', extra={'url': short_url, 'event': LogEvent.URL_REJECTED})
            return ResultModel.failure(ErrorCode.DOMAIN, f'short url {short_url} does not have the shortener domain {self.domain}')

        try:
            association = self.dao.get(url_alias(short_url))
        except AssociationNotFoundError:
            return self._not_found(short_url)
        if not association.active:
            return self._not_found(short_url)

        self.dao.update(replace(association, hit_count=association.hit_count + 1))
        logger.debug('Resolved short URL.', extra={'alias': association.alias, 'event': LogEvent.URL_RESOLVED})
        return ResultModel.success(association.long_url)

    @beartype
    def count(self, url: str) -> ResultModel:
        """Return the hit count for a short or long URL, active or not

        Returns:
            ResultModel: value is the association's hit count.
                Fails with URL_SYNTAX or NOT_FOUND.
        """
        if not is_valid_url(url):
            return self._url_syntax_error(url)

        try:
            association = self._lookup(url)
        except AssociationNotFoundError:
            return self._not_found(url)
        return ResultModel.success(association.hit_count)

    @beartype
    def remove(self, url: str) -> ResultModel:
        """Deactivate the association matching a short or long URL

        Deactivating an already inactive association succeeds.

        Returns:
            ResultModel: value-less success. Fails with URL_SYNTAX or NOT_FOUND.
        """
        if not is_valid_url(url):
            return self._url_syntax_error(url)

        try:
            association = self._lookup(url)
        except AssociationNotFoundError:
            return self._not_found(url)

        if association.active:
            self.dao.update(replace(association, active=False))
            logger.info(
                'Deactivated association.',
                extra={'alias': association.alias, 'event': LogEvent.ASSOCIATION_DEACTIVATED},
            )
        return ResultModel.success()

    def _lookup(self, url: str) -> AssociationModel:
        """Find an association by alias for short URLs, by long URL otherwise.

        Raises:
            AssociationNotFoundError: If nothing matches.
        """
        if is_same_origin(url, self.domain):
            return self.dao.get(url_alias(url))
        return self.dao.find(url.lower())

    def _insert(self, folded_url: str) -> AssociationModel:
        """Insert a new association under a freshly generated alias.

        Raises:
            AliasAlreadyExistsError: If MAX_ALIAS_ATTEMPTS aliases in a row collide.
        """
        for attempt in range(1, MAX_ALIAS_ATTEMPTS + 1):
            counter = self.dao.count(increment=True)
            alias = generate_shortcode(counter, salt=self.salt, length=self.shortcode_length)
            association = AssociationModel(long_url=folded_url, alias=alias)
            try:
                self.dao.insert(association)
            except AliasAlreadyExistsError:
                level = logging.ERROR if attempt == MAX_ALIAS_ATTEMPTS else logging.WARNING
                logger.log(level, 'Alias collision.', extra={'alias': alias, 'attempt': attempt, 'event': LogEvent.ALIAS_COLLISION})
                if attempt == MAX_ALIAS_ATTEMPTS:
                    raise
            else:
                return association

    def _url_syntax_error(self, url: str) -> ResultModel:
        logger.debug('Rejected malformed URL.', extra={'url': url, 'event': LogEvent.URL_REJECTED})
        return ResultModel.failure(ErrorCode.URL_SYNTAX, f'bad url {url}')

    def _not_found(self, url: str) -> ResultModel:
        logger.debug('Association not found.', extra={'url': url, 'event': LogEvent.ASSOCIATION_NOT_FOUND})
        return ResultModel.failure(ErrorCode.NOT_FOUND, f'{url} not found')
