# fiscalbr/boleto/convenio.py
# Boleto de arrecadação (convênio: concessionárias, tributos).
# Linha de 48 dígitos = 4 campos de 11 dígitos + DV; barras = os 4 blocos
# de 11 concatenados, com DV geral na posição 3.
#
# Posições no código de barras:
#   0     '8' (arrecadação)
#   1     segmento
#   2     tipo de valor: 6/7 -> Módulo 10, demais -> Módulo 11 (convênio)
#   3     DV geral
#   4-14  valor em centavos
#   15-22 identificação da empresa/órgão
#   23-43 campo livre

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..checksum import mod10_calculate, mod11_convenio_calculate
from ..erros import Err, ErrorCode, Ok, Result, field_error
from ..modelos import Boleto, BoletoKind

logger = logging.getLogger(__name__)

TAMANHO_LINHA = 48
TAMANHO_BARRAS = 44
TAMANHO_BLOCO = 11
TIPOS_MOD10 = ("6", "7")


def calculadora_dv(tipo_valor: str) -> Callable[[str], Optional[int]]:
    """Algoritmo de DV selecionado pelo dígito de tipo de valor."""
    return mod10_calculate if tipo_valor in TIPOS_MOD10 else mod11_convenio_calculate


def _blocos(barras: str) -> list[str]:
    return [barras[i:i + TAMANHO_BLOCO] for i in range(0, TAMANHO_BARRAS, TAMANHO_BLOCO)]


# ==========================
#  CONVERSÃO LINHA <-> BARRAS
# ==========================
def line_to_barcode(linha: str) -> str:
    return "".join(linha[i * 12:i * 12 + TAMANHO_BLOCO] for i in range(4))


def barcode_to_line(barras: str) -> str:
    calc = calculadora_dv(barras[2])
    return "".join(bloco + str(calc(bloco)) for bloco in _blocos(barras))


# ==========================
#  VALIDAÇÃO
# ==========================
def validate_line(linha: str) -> Result:
    if len(linha) != TAMANHO_LINHA or not linha.startswith("8"):
        return Err(ErrorCode.INVALID_LENGTH)

    calc = calculadora_dv(linha[2])
    for n in range(1, 5):
        campo = linha[(n - 1) * 12:n * 12]
        if calc(campo[:TAMANHO_BLOCO]) != int(campo[TAMANHO_BLOCO]):
            logger.debug("Linha de convênio: DV do campo %s inválido", n)
            return Err(field_error(n))
    return Ok()


def validate_barcode(barras: str) -> Result:
    if len(barras) != TAMANHO_BARRAS or not barras.startswith("8"):
        return Err(ErrorCode.INVALID_LENGTH)
    calc = calculadora_dv(barras[2])
    if calc(barras[:3] + barras[4:]) != int(barras[3]):
        return Err(ErrorCode.INVALID_CHECKSUM)
    return Ok()


# ==========================
#  DECODIFICAÇÃO
# ==========================
def _decode(raw: str, barras: str, linha: str) -> Boleto:
    centavos = int(barras[4:15])
    return Boleto(
        kind=BoletoKind.CONVENIO,
        raw=raw,
        barcode=barras,
        line=linha,
        segment=barras[1],
        value_type=barras[2],
        company_id=barras[15:23],
        amount_cents=centavos or None,
        free_field=barras[23:44],
    )


def parse_line(linha: str) -> Result:
    res = validate_line(linha)
    if not res:
        return res
    return Ok(_decode(linha, line_to_barcode(linha), linha))


def parse_barcode(barras: str) -> Result:
    res = validate_barcode(barras)
    if not res:
        return res
    return Ok(_decode(barras, barras, barcode_to_line(barras)))
