# fiscalbr/ie/norte.py
# Inscrição Estadual – Região Norte
# AC (13, 2 DVs), AM, AP (faixas p/d), PA, RO (9/14), RR (Módulo 9), TO (tipo 01/02/03/99)

from typing import Dict

from ..checksum import remap_menos_dez, remap_zero
from ..modelos import UF
from .regras import (
    PorTamanho,
    RegraAM,
    RegraAP,
    RegraDoisDV,
    RegraDV,
    RegraMod9,
    RegraTO,
    Validador,
    pesos_decrescentes,
)

PESOS_9_2 = pesos_decrescentes(9)

# AC e DF compartilham os pesos dos dois DVs
PESOS_AC_D1 = [4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
PESOS_AC_D2 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

PREFIXOS_PA = ("15", "75", "76", "77", "78", "79")


# -------------------- AC (Acre) --------------------
AC = RegraDoisDV(UF.AC, PESOS_AC_D1, PESOS_AC_D2, remap_zero, prefixos=("01",), mascara="##.###.###/###-##")

# -------------------- AM (Amazonas) --------------------
AM = RegraAM(UF.AM, PESOS_9_2, mascara="##.###.###-#")

# -------------------- AP (Amapá) --------------------
AP = RegraAP(UF.AP, PESOS_9_2, prefixos=("03",))

# -------------------- PA (Pará) --------------------
PA = RegraDV(UF.PA, PESOS_9_2, prefixos=PREFIXOS_PA, mascara="########-#")

# -------------------- RO (Rondônia) --------------------
# 14 dígitos (atual) ou 9 dígitos (legado: só os 5 dígitos da empresa entram no cálculo)
RO = PorTamanho(
    UF.RO,
    RegraDV(UF.RO, [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2], remap_menos_dez, mascara="#############-#"),
    RegraDV(UF.RO, [6, 5, 4, 3, 2], remap_menos_dez, tamanho=9, mascara="###.#####-#"),
)

# -------------------- RR (Roraima) --------------------
RR = RegraMod9(UF.RR, 9, prefixos=("24",), mascara="########-#")

# -------------------- TO (Tocantins) --------------------
TO = RegraTO(UF.TO, PESOS_9_2, tamanho=11, mascara="##.##.######-#")


VALIDADORES_NORTE: Dict[UF, Validador] = {
    UF.AC: AC,
    UF.AM: AM,
    UF.AP: AP,
    UF.PA: PA,
    UF.RO: RO,
    UF.RR: RR,
    UF.TO: TO,
}
