# fiscalbr/ie/centro_oeste.py
# Inscrição Estadual – Região Centro-Oeste
# DF (13, 2 DVs), GO (faixa especial), MT (11), MS (prefixo 28)

from typing import Dict

from ..checksum import remap_zero
from ..modelos import UF
from .norte import PESOS_AC_D1, PESOS_AC_D2
from .regras import RegraDoisDV, RegraDV, RegraGO, Validador, pesos_decrescentes

PESOS_9_2 = pesos_decrescentes(9)

# GO: 10, 11 ou 20..29
PREFIXOS_GO = ("10", "11") + tuple(f"2{d}" for d in range(10))


# -------------------- DF (Distrito Federal) --------------------
DF = RegraDoisDV(UF.DF, PESOS_AC_D1, PESOS_AC_D2, remap_zero, prefixos=("07",), mascara="##.######.###-##")

# -------------------- GO (Goiás) --------------------
GO = RegraGO(UF.GO, PESOS_9_2, prefixos=PREFIXOS_GO, mascara="##.###.###-#")

# -------------------- MT (Mato Grosso) --------------------
MT = RegraDV(UF.MT, [3, 2, 9, 8, 7, 6, 5, 4, 3, 2], mascara="##########-#")

# -------------------- MS (Mato Grosso do Sul) --------------------
MS = RegraDV(UF.MS, PESOS_9_2, prefixos=("28",), mascara="##.###.###-#")


VALIDADORES_CO: Dict[UF, Validador] = {
    UF.DF: DF,
    UF.GO: GO,
    UF.MS: MS,
    UF.MT: MT,
}
