from urlshortener.dao.base.association_base_dao import AssociationBaseDAO


__all__ = [
    'AssociationBaseDAO',
]
