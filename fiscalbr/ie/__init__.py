# fiscalbr/ie/__init__.py
# Resolução de Inscrição Estadual sem UF informada.
#
# (a) tamanho e prefixo escolhem o conjunto de UFs candidatas;
# (b) cada candidata valida o número; todas as que aceitam são devolvidas.
# Várias UFs usam o mesmo algoritmo (Módulo 11, pesos 9-2), então um mesmo
# número pode ser válido em mais de uma delas.

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

from ..erros import Err, ErrorCode, Ok, Result
from ..modelos import IE, UF
from ..sanitizacao import sanitize_ie
from .centro_oeste import VALIDADORES_CO
from .nordeste import VALIDADORES_NE
from .norte import VALIDADORES_NORTE
from .regras import Validador
from .sudeste import VALIDADORES_SE
from .sul import VALIDADORES_SUL

logger = logging.getLogger(__name__)

VALIDADORES: Dict[UF, Validador] = {
    **VALIDADORES_NORTE,
    **VALIDADORES_NE,
    **VALIDADORES_CO,
    **VALIDADORES_SE,
    **VALIDADORES_SUL,
}

_PA = (UF.PA,)

# (tamanho, prefixo) -> candidatas; prefixos mais específicos primeiro
_CANDIDATAS_POR_PREFIXO: Dict[Tuple[int, str], Tuple[UF, ...]] = {
    (9, "24"): (UF.RR, UF.AL),
    (9, "28"): (UF.MS,),
    (9, "03"): (UF.AP,),
    (9, "12"): (UF.MA,),
    (9, "15"): _PA,
    (9, "75"): _PA,
    (9, "76"): _PA,
    (9, "77"): _PA,
    (9, "78"): _PA,
    (9, "79"): _PA,
    (9, "20"): (UF.RN,),
    (10, "20"): (UF.RN,),
    (13, "01"): (UF.AC,),
    (13, "07"): (UF.DF,),
}

_CANDIDATAS_POR_TAMANHO: Dict[int, Tuple[UF, ...]] = {
    8: (UF.BA, UF.RJ),
    9: (UF.GO, UF.BA, UF.AM, UF.CE, UF.ES, UF.PB, UF.PI, UF.SC, UF.SE, UF.PE, UF.RO),
    10: (UF.RS, UF.PR, UF.RN),
    11: (UF.MT, UF.TO),
    12: (UF.SP,),
    13: (UF.MG, UF.AC, UF.DF),
    14: (UF.RO, UF.PE),
}


def candidate_states(ie: str) -> Tuple[UF, ...]:
    """UFs cujo tamanho/prefixo são compatíveis com o número já normalizado."""
    if ie.startswith("P"):
        return (UF.SP,) if len(ie) == 13 else ()
    por_prefixo = _CANDIDATAS_POR_PREFIXO.get((len(ie), ie[:2]))
    if por_prefixo is not None:
        return por_prefixo
    return _CANDIDATAS_POR_TAMANHO.get(len(ie), ())


def _ufs_validas(ie: str) -> List[UF]:
    candidatas = candidate_states(ie)
    validas = [uf for uf in candidatas if VALIDADORES[uf].validate(ie)]
    logger.debug("IE %s: candidatas=%s válidas=%s", ie, [u.value for u in candidatas], [u.value for u in validas])
    return validas


def _as_uf(state: Union[UF, str]) -> Optional[UF]:
    if isinstance(state, UF):
        return state
    try:
        return UF((state or "").strip().lower())
    except ValueError:
        return None


def detect_states(raw) -> Result:
    """Ok([UF, ...]) com todas as UFs em que o número é válido, na ordem de tentativa."""
    res = sanitize_ie(raw)
    if not res:
        return res
    validas = _ufs_validas(res.value)
    if not validas:
        return Err(ErrorCode.INVALID_CHECKSUM)
    return Ok(validas)


def detect_state(raw) -> Result:
    """Primeira UF em que o número é válido."""
    return detect_states(raw).map(lambda ufs: ufs[0])


def validate(raw, state: Union[UF, str, None] = None) -> Result:
    """
    Sem `state`: válido se ao menos uma UF candidata aceita o número.
    Com `state`: valida só contra aquela UF, devolvendo o motivo dela
    (invalid_prefix, invalid_length, invalid_format, invalid_checksum).
    """
    if state is None:
        return detect_states(raw).map(lambda _: None)

    uf = _as_uf(state)
    if uf is None:
        raise ValueError(f"UF desconhecida: {state!r}")

    res = sanitize_ie(raw)
    if not res:
        return res
    return VALIDADORES[uf].validate(res.value)


def parse(raw) -> Result:
    """Ok([IE, ...]): um registro por UF válida, formatado pela própria UF."""
    res = sanitize_ie(raw)
    if not res:
        return res
    ie = res.value
    validas = _ufs_validas(ie)
    if not validas:
        return Err(ErrorCode.INVALID_CHECKSUM)
    return Ok([IE(state=uf, raw=ie, formatted=VALIDADORES[uf].format(ie)) for uf in validas])


def format_ie(ie: str, state: Union[UF, str]) -> str:
    """Formata um número já normalizado com a máscara da UF."""
    uf = _as_uf(state)
    if uf is None:
        raise ValueError(f"UF desconhecida: {state!r}")
    return VALIDADORES[uf].format(ie)


__all__ = [
    "VALIDADORES",
    "candidate_states",
    "detect_states",
    "detect_state",
    "validate",
    "parse",
    "format_ie",
]
