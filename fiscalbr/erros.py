# fiscalbr/erros.py
# Vocabulário de erros estruturados e o tipo Result compartilhado por
# boleto e IE. Erros são valores; só `Result.unwrap()` lança exceção.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    INVALID_FORMAT = "invalid_format"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_FIELD_CHECKSUM = "invalid_field_checksum"
    INVALID_PREFIX = "invalid_prefix"
    UNKNOWN_TYPE = "unknown_type"


# Motivo: um ErrorCode ou (INVALID_FIELD_CHECKSUM, n) com n em 1..4
Reason = Union[ErrorCode, Tuple[ErrorCode, int]]


_MENSAGENS = {
    ErrorCode.INVALID_FORMAT: "Invalid format: input must contain only digits",
    ErrorCode.INVALID_LENGTH: "Invalid length for the identifier",
    ErrorCode.INVALID_CHECKSUM: "Invalid general check digit",
    ErrorCode.INVALID_PREFIX: "Invalid prefix for the state",
    ErrorCode.UNKNOWN_TYPE: "Unknown boleto type: could not identify as banking or convenio",
}


def field_error(campo: int) -> Tuple[ErrorCode, int]:
    """Motivo de DV inválido em um campo da linha digitável (1-indexado)."""
    return (ErrorCode.INVALID_FIELD_CHECKSUM, campo)


def reason_code(reason: Reason) -> ErrorCode:
    if isinstance(reason, tuple):
        return reason[0]
    return reason


def reason_label(reason: Reason) -> str:
    """Rótulo plano do motivo, ex.: 'invalid_field_checksum:2'."""
    if isinstance(reason, tuple):
        return f"{reason[0].value}:{reason[1]}"
    return reason.value


def message_for(reason: Reason) -> str:
    """Mensagem legível para apresentação. O núcleo nunca depende dela."""
    if isinstance(reason, tuple):
        return f"Invalid check digit in field {reason[1]}"
    return _MENSAGENS[reason]


class ValidationError(ValueError):
    """Lançada apenas por `Result.unwrap()` quando o resultado é um erro."""

    def __init__(self, reason: Reason, message: Optional[str] = None):
        self.reason = reason
        self.message = message or message_for(reason)
        super().__init__(self.message)


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Reason] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValidationError(self.error)
        return self.value  # type: ignore[return-value]

    def map(self, fn) -> "Result[Any]":
        if self.error is not None:
            return self
        return Ok(fn(self.value))


def Ok(value: Any = None) -> Result:
    return Result(value=value)


def Err(reason: Reason) -> Result:
    return Result(error=reason)
