# fiscalbr/sanitizacao.py
# Limpeza da entrada: remove pontuação comum e valida formato/tamanho
# antes de qualquer cálculo de dígito verificador.

from __future__ import annotations

import re

from .erros import Err, ErrorCode, Ok, Result

_PONTUACAO = re.compile(r"[.\-/\s]")
_DIGITOS = re.compile(r"^[0-9]+$")

TAMANHOS_BOLETO = (44, 47, 48)
TAMANHO_IE_MIN = 8
TAMANHO_IE_MAX = 14
TAMANHO_PRODUTOR_RURAL = 12


def limpar(raw: str) -> str:
    """Remove pontos, hífens, barras e espaços."""
    return _PONTUACAO.sub("", raw)


def sanitize_boleto(raw) -> Result:
    """
    Devolve Ok(dígitos) para 44, 47 ou 48 dígitos.
    Entrada vazia -> invalid_format; contagem errada -> invalid_length;
    qualquer outro caractere remanescente -> invalid_format.
    """
    if not isinstance(raw, str):
        return Err(ErrorCode.INVALID_FORMAT)

    limpo = limpar(raw)
    n_digitos = sum(1 for ch in limpo if "0" <= ch <= "9")

    if n_digitos == 0:
        return Err(ErrorCode.INVALID_FORMAT)
    if n_digitos not in TAMANHOS_BOLETO:
        return Err(ErrorCode.INVALID_LENGTH)
    if not _DIGITOS.match(limpo):
        return Err(ErrorCode.INVALID_FORMAT)
    return Ok(limpo)


def sanitize_ie(raw) -> Result:
    """
    Devolve Ok(texto normalizado) para 8 a 14 dígitos ou 'P' + 12 dígitos
    (produtor rural de SP). Formato é verificado antes do tamanho.
    """
    if not isinstance(raw, str):
        return Err(ErrorCode.INVALID_FORMAT)

    limpo = limpar(raw).upper()
    corpo = limpo[1:] if limpo.startswith("P") else limpo

    if not _DIGITOS.match(corpo):
        return Err(ErrorCode.INVALID_FORMAT)

    if limpo.startswith("P"):
        ok_tamanho = len(corpo) == TAMANHO_PRODUTOR_RURAL
    else:
        ok_tamanho = TAMANHO_IE_MIN <= len(corpo) <= TAMANHO_IE_MAX

    if not ok_tamanho:
        return Err(ErrorCode.INVALID_LENGTH)
    return Ok(limpo)
