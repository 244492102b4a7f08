"""Result envelope returned by every ShortenerStore operation

Expected failures are modeled as data, never raised. A result is either a
success (optionally carrying a value) or a failure carrying an ErrorModel
whose message is always prefixed with "<code>: ".

Wire format (see ResultModel.to_dict()):
    {}                                               value-less success
    {"value": "http://short.ly/Gh71WPT"}             success with value
    {"error": {"code": "...", "message": "..."}}     failure

Example:
    >>> ResultModel.success(3).to_dict()
    {'value': 3}
    >>> ResultModel.failure(ErrorCode.DOMAIN, 'nope').to_dict()
    {'error': {'code': 'DOMAIN', 'message': 'DOMAIN: nope'}}
"""

from dataclasses import dataclass

from urlshortener.constants import ErrorCode
from urlshortener.types import ErrorEnvelope, ResultEnvelope, ResultValue


@dataclass(frozen=True)
class ErrorModel:
    code: ErrorCode
    message: str

    def to_dict(self) -> ErrorEnvelope:
        return {'code': str(self.code), 'message': self.message}


@dataclass(frozen=True)
class ResultModel:
    value: ResultValue = None
    error: ErrorModel | None = None

    @classmethod
    def success(cls, value: ResultValue = None) -> 'ResultModel':
        return cls(value=value)

    @classmethod
    def failure(cls, code: ErrorCode, detail: str) -> 'ResultModel':
        """Build a failed result whose message is prefixed with the error code."""
        return cls(error=ErrorModel(code=code, message=f'{code}: {detail}'))

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> ResultEnvelope:
        if self.error is not None:
            return {'error': self.error.to_dict()}
        if self.value is None:
            return {}
        return {'value': self.value}
