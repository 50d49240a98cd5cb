# fiscalbr/auditoria.py
# Auditoria em lote: valida uma coluna de um DataFrame e devolve um
# DataFrame com uma linha por entrada.

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import pandas as pd

from . import boleto as _boleto
from . import ie as _ie
from .erros import Err, ErrorCode, Result, message_for, reason_label

logger = logging.getLogger(__name__)

COLUNAS_BOLETO = ["entrada", "valido", "motivo", "mensagem", "tipo", "codigo_barras", "valor", "vencimento"]
COLUNAS_IE = ["entrada", "valido", "motivo", "mensagem", "ufs", "formatado"]


def _vazio(valor) -> bool:
    return valor is None or (not isinstance(valor, str) and pd.isna(valor))


def _linha_erro(entrada, res: Result) -> dict:
    return {
        "entrada": entrada,
        "valido": False,
        "motivo": reason_label(res.error),
        "mensagem": message_for(res.error),
    }


def _sem_valor() -> Result:
    return Err(ErrorCode.INVALID_FORMAT)


def audit_boletos(df: pd.DataFrame, coluna: str, reference_date: Optional[date] = None) -> pd.DataFrame:
    if coluna not in df.columns:
        raise KeyError(f"Coluna '{coluna}' não encontrada")

    linhas = []
    for entrada in df[coluna].tolist():
        res = _sem_valor() if _vazio(entrada) else _boleto.parse(str(entrada), reference_date)
        if not res:
            linhas.append(_linha_erro(entrada, res))
            continue
        b = res.value
        linhas.append({
            "entrada": entrada,
            "valido": True,
            "motivo": "",
            "mensagem": "",
            "tipo": b.kind.value,
            "codigo_barras": b.barcode,
            "valor": b.amount,
            "vencimento": b.due_date,
        })

    out = pd.DataFrame(linhas, columns=COLUNAS_BOLETO, index=df.index)
    logger.info("Auditoria de boletos: %s linhas, %s inválidas", len(out), int((~out["valido"].astype(bool)).sum()))
    return out


def audit_ies(df: pd.DataFrame, coluna: str) -> pd.DataFrame:
    if coluna not in df.columns:
        raise KeyError(f"Coluna '{coluna}' não encontrada")

    linhas = []
    for entrada in df[coluna].tolist():
        res = _sem_valor() if _vazio(entrada) else _ie.parse(str(entrada))
        if not res:
            linhas.append(_linha_erro(entrada, res))
            continue
        ies = res.value
        linhas.append({
            "entrada": entrada,
            "valido": True,
            "motivo": "",
            "mensagem": "",
            "ufs": ",".join(i.state.value for i in ies),
            "formatado": ies[0].formatted,
        })

    out = pd.DataFrame(linhas, columns=COLUNAS_IE, index=df.index)
    logger.info("Auditoria de IEs: %s linhas, %s inválidas", len(out), int((~out["valido"].astype(bool)).sum()))
    return out


def resumo(auditoria: pd.DataFrame) -> pd.DataFrame:
    """Contagem de linhas por motivo ('' = válidas)."""
    if auditoria.empty:
        return pd.DataFrame(columns=["motivo", "quantidade"])
    contagem = auditoria.groupby("motivo", sort=True).size()
    return contagem.rename("quantidade").reset_index()
