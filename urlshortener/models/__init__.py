from urlshortener.models.association_model import AssociationModel
from urlshortener.models.result_model import ErrorModel, ResultModel


__all__ = [
    'AssociationModel',
    'ErrorModel',
    'ResultModel',
]
