# fiscalbr/boleto/bancario.py
# Boleto bancário (cobrança): linha digitável de 47 dígitos e código de
# barras de 44.
#
# Linha:  AAABC.CCCCX DDDDD.DDDDDY EEEEE.EEEEEZ K UUUUVVVVVVVVVV
#   campo 1 = banco(3) + moeda(1) + livre(5) + DV      [Mód. 10]
#   campo 2 = livre(10) + DV                           [Mód. 10]
#   campo 3 = livre(10) + DV                           [Mód. 10]
#   K       = DV geral                                 [Mód. 11 bancário]
#   campo 5 = fator de vencimento(4) + valor(10)
# Barras: banco(3) moeda(1) DV(1) fator(4) valor(10) livre(25)

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..checksum import mod10_calculate, mod10_valid, mod11_banking_calculate
from ..erros import Err, ErrorCode, Ok, Result, field_error
from ..modelos import Boleto, BoletoKind
from .vencimento import due_date_from_factor

logger = logging.getLogger(__name__)

TAMANHO_LINHA = 47
TAMANHO_BARRAS = 44

# (início, fim) de cada campo com DV na linha
_CAMPOS = ((0, 10), (10, 21), (21, 32))
_POS_DV_GERAL = 32


def _valor_centavos(valor: str) -> Optional[int]:
    centavos = int(valor)
    return centavos or None


# ==========================
#  CONVERSÃO LINHA <-> BARRAS
# ==========================
def line_to_barcode(linha: str) -> str:
    """Remonta o código de barras a partir de uma linha de 47 dígitos (não valida)."""
    livre = linha[4:9] + linha[10:20] + linha[21:31]
    return linha[0:4] + linha[_POS_DV_GERAL] + linha[33:47] + livre


def barcode_to_line(barras: str) -> str:
    """Gera a linha digitável recalculando os DVs dos campos 1 a 3."""
    campo1 = barras[0:4] + barras[19:24]
    campo2 = barras[24:34]
    campo3 = barras[34:44]
    partes = [c + str(mod10_calculate(c)) for c in (campo1, campo2, campo3)]
    return "".join(partes) + barras[4] + barras[5:19]


def _payload_barras(barras: str) -> str:
    """Os 43 dígitos cobertos pelo DV geral (tudo menos a posição 4)."""
    return barras[:4] + barras[5:]


# ==========================
#  VALIDAÇÃO
# ==========================
def validate_line(linha: str) -> Result:
    if len(linha) != TAMANHO_LINHA:
        return Err(ErrorCode.INVALID_LENGTH)

    for n, (ini, fim) in enumerate(_CAMPOS, start=1):
        if not mod10_valid(linha[ini:fim]):
            logger.debug("Linha bancária: DV do campo %s inválido", n)
            return Err(field_error(n))

    barras = line_to_barcode(linha)
    if mod11_banking_calculate(_payload_barras(barras)) != int(linha[_POS_DV_GERAL]):
        return Err(ErrorCode.INVALID_CHECKSUM)
    return Ok()


def validate_barcode(barras: str) -> Result:
    if len(barras) != TAMANHO_BARRAS:
        return Err(ErrorCode.INVALID_LENGTH)
    if mod11_banking_calculate(_payload_barras(barras)) != int(barras[4]):
        return Err(ErrorCode.INVALID_CHECKSUM)
    return Ok()


# ==========================
#  DECODIFICAÇÃO
# ==========================
def _decode(raw: str, barras: str, linha: str, reference_date: Optional[date]) -> Boleto:
    return Boleto(
        kind=BoletoKind.BANKING,
        raw=raw,
        barcode=barras,
        line=linha,
        bank_code=barras[0:3],
        currency_code=barras[3],
        amount_cents=_valor_centavos(barras[9:19]),
        due_date=due_date_from_factor(barras[5:9], reference_date),
        free_field=barras[19:44],
    )


def parse_line(linha: str, reference_date: Optional[date] = None) -> Result:
    res = validate_line(linha)
    if not res:
        return res
    return Ok(_decode(linha, line_to_barcode(linha), linha, reference_date))


def parse_barcode(barras: str, reference_date: Optional[date] = None) -> Result:
    res = validate_barcode(barras)
    if not res:
        return res
    return Ok(_decode(barras, barras, barcode_to_line(barras), reference_date))
