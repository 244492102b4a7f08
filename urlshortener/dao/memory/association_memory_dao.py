"""In-memory Data Access Object (DAO) for long URL to alias associations

Holds every association in a dict keyed by alias. The DAO is owned by a
single ShortenerStore and is not synchronized: concurrent callers must
serialize access externally.

Classes:
    AssociationMemoryDAO:
        DAO for storing and retrieving AssociationModel in process memory.
"""

from beartype import beartype

from urlshortener.models import AssociationModel
from urlshortener.dao.base import AssociationBaseDAO
from urlshortener.dao.exceptions import AliasAlreadyExistsError, AssociationNotFoundError


class AssociationMemoryDAO(AssociationBaseDAO):
    """Dict-backed implementation of AssociationBaseDAO

    Attributes:
        associations (dict[str, AssociationModel]):
            Mapping from alias to association record.
        counter (int):
            Alias seed counter, starts at 0.

    Example:
        >>> dao = AssociationMemoryDAO()
        >>> dao.count(increment=True)
        1
        >>> len(dao)
        0
    """

    def __init__(self):
        self.associations: dict[str, AssociationModel] = {}
        self.counter = 0

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, association: AssociationModel) -> 'AssociationMemoryDAO':
        if association.alias in self.associations:
            raise AliasAlreadyExistsError(f"Alias '{association.alias}' already exists.")
        self.associations[association.alias] = association
        return self

    @beartype
    def get(self, alias: str) -> AssociationModel:
        try:
            return self.associations[alias]
        except KeyError as e:
            raise AssociationNotFoundError(f"Alias '{alias}' not found.") from e

    @beartype
    def find(self, long_url: str) -> AssociationModel:
        # At most one record exists per long URL, so the first match is the only one
        for association in self.associations.values():
            if association.long_url == long_url:
                return association
        raise AssociationNotFoundError(f"Long URL '{long_url}' not found.")

    @beartype
    def update(self, association: AssociationModel) -> 'AssociationMemoryDAO':
        if association.alias not in self.associations:
            raise AssociationNotFoundError(f"Alias '{association.alias}' not found.")
        self.associations[association.alias] = association
        return self

    @beartype
    def count(self, increment: bool = False) -> int:
        if increment:
            self.counter += 1
        return self.counter

    def __len__(self) -> int:
        return len(self.associations)
