# fiscalbr/boleto/__init__.py
# Classificação (tamanho, 1º dígito) e despacho para os codecs bancário e
# de convênio.

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Optional

from ..erros import Err, ErrorCode, Ok, Result
from ..modelos import BoletoKind
from ..sanitizacao import sanitize_boleto
from . import bancario, convenio
from .vencimento import due_date_from_factor, due_factor

logger = logging.getLogger(__name__)


class Forma(str, Enum):
    LINE = "line"
    BARCODE = "barcode"


# (tamanho, começa com '8') -> (tipo, forma)
_TIPOS = {
    (44, True): (BoletoKind.CONVENIO, Forma.BARCODE),
    (44, False): (BoletoKind.BANKING, Forma.BARCODE),
    (47, True): (BoletoKind.BANKING, Forma.LINE),
    (47, False): (BoletoKind.BANKING, Forma.LINE),
    (48, True): (BoletoKind.CONVENIO, Forma.LINE),
}

_CODECS = {
    BoletoKind.BANKING: bancario,
    BoletoKind.CONVENIO: convenio,
}


def detect_type(digits: str) -> Result:
    """Ok((BoletoKind, Forma)) ou Err(unknown_type)."""
    tipo = _TIPOS.get((len(digits), digits.startswith("8")))
    if tipo is None:
        return Err(ErrorCode.UNKNOWN_TYPE)
    return Ok(tipo)


def _classifica(raw) -> Result:
    res = sanitize_boleto(raw)
    if not res:
        return res
    digits = res.value
    tipo = detect_type(digits)
    if not tipo:
        return tipo
    kind, forma = tipo.value
    logger.debug("Boleto classificado como %s/%s (%s dígitos)", kind.value, forma.value, len(digits))
    return Ok((digits, kind, forma))


def validate(raw) -> Result:
    res = _classifica(raw)
    if not res:
        return res
    digits, kind, forma = res.value
    codec = _CODECS[kind]
    if forma is Forma.LINE:
        return codec.validate_line(digits)
    return codec.validate_barcode(digits)


def parse(raw, reference_date: Optional[date] = None) -> Result:
    res = _classifica(raw)
    if not res:
        return res
    digits, kind, forma = res.value
    if kind is BoletoKind.BANKING:
        if forma is Forma.LINE:
            return bancario.parse_line(digits, reference_date)
        return bancario.parse_barcode(digits, reference_date)
    if forma is Forma.LINE:
        return convenio.parse_line(digits)
    return convenio.parse_barcode(digits)


def to_barcode(raw) -> Result:
    """Valida e devolve o código de barras de 44 dígitos (de linha ou barras)."""
    res = _classifica(raw)
    if not res:
        return res
    digits, kind, forma = res.value
    codec = _CODECS[kind]
    if forma is Forma.BARCODE:
        return codec.validate_barcode(digits).map(lambda _: digits)
    return codec.validate_line(digits).map(lambda _: codec.line_to_barcode(digits))


def to_line(raw) -> Result:
    """Valida e devolve a linha digitável (47 ou 48 dígitos)."""
    res = _classifica(raw)
    if not res:
        return res
    digits, kind, forma = res.value
    codec = _CODECS[kind]
    if forma is Forma.LINE:
        return codec.validate_line(digits).map(lambda _: digits)
    return codec.validate_barcode(digits).map(lambda _: codec.barcode_to_line(digits))


__all__ = [
    "Forma",
    "detect_type",
    "validate",
    "parse",
    "to_barcode",
    "to_line",
    "due_date_from_factor",
    "due_factor",
    "bancario",
    "convenio",
]
