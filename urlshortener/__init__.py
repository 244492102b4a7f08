from urlshortener.constants import ErrorCode
from urlshortener.models import AssociationModel, ErrorModel, ResultModel
from urlshortener.store import ShortenerStore


__all__ = [
    'AssociationModel',
    'ErrorCode',
    'ErrorModel',
    'ResultModel',
    'ShortenerStore',
]
