# fiscalbr/boleto/vencimento.py
# Fator de vencimento FEBRABAN: dias desde uma data-base.
# A faixa 1000..9999 da base de 1997 esgotou em 2025-02-21; a partir de
# 2025-02-22 o fator reinicia em 1000 contado da base de 2022-05-29.

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..config import get_settings

logger = logging.getLogger(__name__)

DATA_BASE_ANTIGA = date(1997, 10, 7)
DATA_BASE_NOVA = date(2022, 5, 29)
FATOR_MIN = 1000
FATOR_MAX = 9999


def _menos_anos(d: date, anos: int) -> date:
    try:
        return d.replace(year=d.year - anos)
    except ValueError:
        # 29/02 num ano não bissexto
        return d.replace(year=d.year - anos, day=28)


def due_date_from_factor(
    fator: str,
    reference_date: Optional[date] = None,
    janela_anos: Optional[int] = None,
) -> Optional[date]:
    """
    Converte o fator (4 dígitos) em data. '0000' -> None (sem vencimento).

    Calcula pela base antiga; se o resultado ficar mais de `janela_anos`
    antes da data de referência, recalcula pela base nova.
    """
    if fator == "0000":
        return None

    settings = get_settings()
    referencia = reference_date or settings.hoje()
    janela = settings.janela_anos if janela_anos is None else janela_anos

    dias = int(fator)
    vencimento = DATA_BASE_ANTIGA + timedelta(days=dias)
    if vencimento < _menos_anos(referencia, janela):
        novo = DATA_BASE_NOVA + timedelta(days=dias)
        logger.debug("Fator %s: %s anterior à janela de %s anos, usando base 2022 (%s)",
                     fator, vencimento, janela, novo)
        return novo
    return vencimento


def due_factor(vencimento: Optional[date]) -> str:
    """Inverso de `due_date_from_factor`: data -> fator de 4 dígitos do ciclo que a contém."""
    if vencimento is None:
        return "0000"
    for base in (DATA_BASE_ANTIGA, DATA_BASE_NOVA):
        dias = (vencimento - base).days
        if FATOR_MIN <= dias <= FATOR_MAX:
            return f"{dias:04d}"
    raise ValueError(f"Data {vencimento.isoformat()} fora das faixas de fator de vencimento")
