from urlshortener.dao.memory.association_memory_dao import AssociationMemoryDAO


__all__ = [
    'AssociationMemoryDAO',
]
