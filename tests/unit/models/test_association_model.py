"""Unit tests for the AssociationModel dataclass in association_model.py.

Test coverage includes:

1. Model creation and defaults
   - Ensures instances can be created and default to an active record with no hits.

2. Equality semantics
   - Confirms that models with identical data compare equal.

3. Immutability
   - Verifies that fields are frozen and changes go through dataclasses.replace().
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from urlshortener.models import AssociationModel


# -------------------------------------------------
# 1. Model creation and defaults
# -------------------------------------------------

def test_valid_association_model_creation():
    """Ensure AssociationModel can be created with valid data."""
    association = AssociationModel(
        long_url='http://example.com/a',
        alias='Gh71WPT',
        hit_count=3,
        active=False,
    )

    assert association.long_url == 'http://example.com/a'
    assert association.alias == 'Gh71WPT'
    assert association.hit_count == 3
    assert association.active is False


def test_association_model_defaults():
    """A fresh association is active and has never been resolved."""
    association = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT')

    assert association.hit_count == 0
    assert association.active is True


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------

def test_association_model_equality():
    """Models with identical data should compare equal."""
    association1 = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT', hit_count=1)
    association2 = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT', hit_count=1)

    assert association1 == association2


@pytest.mark.parametrize(
    'changes',
    [
        {'long_url': 'http://example.com/b'},
        {'alias': 'XrJQsJI'},
        {'hit_count': 2},
        {'active': False},
    ],
)
def test_association_model_inequality(changes):
    """Any differing field makes models unequal."""
    association = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT', hit_count=1)
    assert association != replace(association, **changes)


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------

@pytest.mark.parametrize('field, value', [('long_url', 'http://x.com'), ('alias', 'x'), ('hit_count', 5), ('active', False)])
def test_association_model_is_frozen(field, value):
    """Fields cannot be reassigned after creation."""
    association = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT')
    with pytest.raises(FrozenInstanceError):
        setattr(association, field, value)


def test_replace_leaves_original_untouched():
    association = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT')
    deactivated = replace(association, active=False)

    assert association.active is True
    assert deactivated.active is False
    assert deactivated.alias == association.alias
