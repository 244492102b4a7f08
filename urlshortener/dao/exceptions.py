"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    AssociationNotFoundError:
        Raised when an AssociationModel is not found in the data store.

    AliasAlreadyExistsError:
        Raised when attempting to insert an AssociationModel whose alias is taken.

Example:
    >>> from urlshortener.dao.exceptions import AssociationNotFoundError
    >>> raise AssociationNotFoundError("Alias 'Gh71WPT' not found.")
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.AssociationNotFoundError: Alias 'Gh71WPT' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class AssociationNotFoundError(DAOError):
    """Exception raised when an AssociationModel is not found in the data store."""

    pass


class AliasAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert an AssociationModel whose alias already exists."""

    pass
