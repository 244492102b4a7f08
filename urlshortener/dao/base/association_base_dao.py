"""Abstract base class for association data access objects (DAOs).

This class establishes a consistent contract for association storage
regardless of the underlying container.

Responsibilities:
    - Provide an interface for inserting, retrieving and updating AssociationModel objects.
    - Look up associations both by alias and by long URL.
    - Hand out the counter used to seed alias generation.

Example:
    >>> from urlshortener.models import AssociationModel
    >>> from urlshortener.dao.memory import AssociationMemoryDAO

    >>> dao = AssociationMemoryDAO()
    >>> dao.insert(AssociationModel(long_url='http://example.com/a', alias='Gh71WPT'))
    <AssociationMemoryDAO>
    >>> dao.get('Gh71WPT').long_url
    'http://example.com/a'
    >>> dao.find('http://example.com/a').alias
    'Gh71WPT'

NOTE:
    Associations are never deleted. Deactivation is an update of the
    `active` flag.
"""

from abc import ABC, abstractmethod

from urlshortener.models import AssociationModel


class AssociationBaseDAO(ABC):
    """Interface for association data access objects (DAOs).

    Methods:
        insert(association: AssociationModel) -> AssociationBaseDAO:
            Insert a new association.
            Raises AliasAlreadyExistsError if the alias is taken.

        get(alias: str) -> AssociationModel:
            Retrieve an association by alias, active or not.
            Raises AssociationNotFoundError if the alias is unknown.

        find(long_url: str) -> AssociationModel:
            Retrieve an association by its (case-folded) long URL, active or not.
            Raises AssociationNotFoundError if no association matches.

        update(association: AssociationModel) -> AssociationBaseDAO:
            Replace the stored association with the same alias.
            Raises AssociationNotFoundError if the alias is unknown.

        count(increment: bool = False) -> int:
            Return the alias seed counter, optionally incrementing it first.

        __len__() -> int:
            Number of stored associations (active and inactive).
    """

    @abstractmethod
    def insert(self, association: AssociationModel) -> 'AssociationBaseDAO':
        """Insert a new AssociationModel into the data store.

        Args:
            association (AssociationModel):
                The association to be inserted.

        Returns:
            AssociationBaseDAO: self (for method chaining)

        Raises:
            AliasAlreadyExistsError:
                If an association with the same alias already exists.
        """
        pass

    @abstractmethod
    def get(self, alias: str) -> AssociationModel:
        """Retrieve an AssociationModel by its alias.

        Raises:
            AssociationNotFoundError:
                If no association with the given alias exists.
        """
        pass

    @abstractmethod
    def find(self, long_url: str) -> AssociationModel:
        """Retrieve an AssociationModel by its case-folded long URL.

        Raises:
            AssociationNotFoundError:
                If no association with the given long URL exists.
        """
        pass

    @abstractmethod
    def update(self, association: AssociationModel) -> 'AssociationBaseDAO':
        """Replace the stored AssociationModel sharing `association.alias`.

        Raises:
            AssociationNotFoundError:
                If no association with the given alias exists.
        """
        pass

    @abstractmethod
    def count(self, increment: bool = False) -> int:
        """Retrieve the current counter value.

        Args:
            increment (bool):
                If True, increment the counter by 1 before returning the value.

        Returns:
            int: The current counter value.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
