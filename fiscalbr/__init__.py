# fiscalbr/__init__.py
# Validação e decodificação de boletos (bancário e convênio) e de
# Inscrições Estaduais das 27 UFs.

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from . import boleto as _boleto
from . import ie as _ie
from .auditoria import audit_boletos, audit_ies, resumo
from .config import Settings, configure_logging, get_settings, load_settings
from .erros import Err, ErrorCode, Ok, Result, ValidationError
from .modelos import IE, UF, Boleto, BoletoKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"


# ========================= Boleto =========================
def validate_boleto(raw: str) -> Result:
    """Ok(None) se a linha digitável ou o código de barras é válido."""
    return _boleto.validate(raw)


def parse_boleto(raw: str, *, reference_date: Optional[date] = None) -> Result:
    """
    Ok(Boleto) com os campos decodificados.
    `reference_date` fixa a data usada na virada do fator de vencimento.
    """
    return _boleto.parse(raw, reference_date)


def boleto_to_barcode(raw: str) -> Result:
    return _boleto.to_barcode(raw)


def boleto_to_line(raw: str) -> Result:
    return _boleto.to_line(raw)


# ========================= IE =========================
def validate_ie(raw: str, state: Union[UF, str, None] = None) -> Result:
    return _ie.validate(raw, state)


def parse_ie(raw: str) -> Result:
    """Ok([IE, ...]) com um registro por UF em que o número é válido."""
    return _ie.parse(raw)


def detect_ie_states(raw: str) -> Result:
    return _ie.detect_states(raw)


__all__ = [
    "validate_boleto",
    "parse_boleto",
    "boleto_to_barcode",
    "boleto_to_line",
    "validate_ie",
    "parse_ie",
    "detect_ie_states",
    "audit_boletos",
    "audit_ies",
    "resumo",
    "Boleto",
    "BoletoKind",
    "IE",
    "UF",
    "ErrorCode",
    "Result",
    "Ok",
    "Err",
    "ValidationError",
    "Settings",
    "load_settings",
    "get_settings",
    "configure_logging",
]
