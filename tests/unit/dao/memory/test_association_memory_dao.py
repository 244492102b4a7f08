"""Unit tests for the AssociationMemoryDAO

Test coverage includes:

1. Insertion behavior
   - Inserting stores the association and returns the DAO for chaining.
   - Duplicate aliases raise AliasAlreadyExistsError.
   - Invalid types raise BeartypeCallHintParamViolation.

2. Retrieval behavior
   - get() looks up by alias, find() by long URL, regardless of active flag.
   - Missing entries raise AssociationNotFoundError.

3. Update behavior
   - update() replaces the stored record; unknown aliases raise AssociationNotFoundError.

4. Counter operations
   - count() starts at 0 and increments only when asked.
"""

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from urlshortener.models import AssociationModel
from urlshortener.dao.base import AssociationBaseDAO
from urlshortener.dao.memory import AssociationMemoryDAO
from urlshortener.dao.exceptions import AliasAlreadyExistsError, AssociationNotFoundError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao():
    return AssociationMemoryDAO()


@pytest.fixture
def association():
    return AssociationModel(long_url='http://example.com/a', alias='Gh71WPT')


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_dao_implements_base_interface(dao):
    assert isinstance(dao, AssociationBaseDAO)
    assert len(dao) == 0


def test_insert_stores_association(dao, association):
    result = dao.insert(association)

    assert result is dao
    assert len(dao) == 1
    assert dao.get('Gh71WPT') == association


def test_insert_duplicate_alias_raises(dao, association):
    dao.insert(association)

    with pytest.raises(AliasAlreadyExistsError, match='Gh71WPT'):
        dao.insert(AssociationModel(long_url='http://example.com/b', alias='Gh71WPT'))
    assert dao.get('Gh71WPT').long_url == 'http://example.com/a'


@pytest.mark.parametrize('bad_value', [None, 'abc', {'alias': 'abc'}])
def test_insert_invalid_type_raises(dao, bad_value):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.insert(bad_value)


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_missing_alias_raises(dao):
    with pytest.raises(AssociationNotFoundError):
        dao.get('missing')


def test_get_returns_inactive_association(dao):
    dao.insert(AssociationModel(long_url='http://example.com/a', alias='Gh71WPT', active=False))
    assert dao.get('Gh71WPT').active is False


def test_find_by_long_url(dao, association):
    dao.insert(association)
    dao.insert(AssociationModel(long_url='http://example.com/b', alias='XrJQsJI', active=False))

    assert dao.find('http://example.com/a') == association
    assert dao.find('http://example.com/b').alias == 'XrJQsJI'


def test_find_is_exact_match(dao, association):
    """Case folding is the caller's job; the DAO compares stored strings as-is."""
    dao.insert(association)

    with pytest.raises(AssociationNotFoundError):
        dao.find('HTTP://EXAMPLE.COM/A')


def test_find_missing_long_url_raises(dao):
    with pytest.raises(AssociationNotFoundError):
        dao.find('http://example.com/a')


@pytest.mark.parametrize('method', ['get', 'find'])
def test_lookup_invalid_type_raises(dao, method):
    with pytest.raises(BeartypeCallHintParamViolation):
        getattr(dao, method)(123)


# -------------------------------
# 3. Update behavior
# -------------------------------


def test_update_replaces_record(dao, association):
    dao.insert(association)
    updated = AssociationModel(long_url=association.long_url, alias=association.alias, hit_count=4, active=False)

    assert dao.update(updated) is dao
    assert dao.get('Gh71WPT') == updated
    assert len(dao) == 1


def test_update_missing_alias_raises(dao, association):
    with pytest.raises(AssociationNotFoundError):
        dao.update(association)
    assert len(dao) == 0


# -------------------------------
# 4. Counter operations
# -------------------------------


def test_count_without_increment(dao):
    assert dao.count() == 0
    assert dao.count() == 0


def test_count_with_increment(dao):
    assert dao.count(increment=True) == 1
    assert dao.count(increment=True) == 2
    assert dao.count() == 2


def test_repr(dao):
    assert repr(dao) == '<AssociationMemoryDAO>'
