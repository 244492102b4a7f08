from urlshortener.dao.base import AssociationBaseDAO
from urlshortener.dao.memory import AssociationMemoryDAO


__all__ = [
    'AssociationBaseDAO',
    'AssociationMemoryDAO',
]
