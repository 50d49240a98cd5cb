# fiscalbr/ie/nordeste.py
# Inscrição Estadual – Região Nordeste
# MA, PI, CE, PB, SE (Módulo 11, pesos 9-2), RN (9/10, soma*10), AL (tipo de empresa),
# PE (e-Fisco 9 / legado 14), BA (8/9, Módulo 10 ou 11)

from typing import Dict

from ..checksum import remap_menos_dez, remap_zero
from ..modelos import UF
from .regras import (
    PorTamanho,
    RegraAL,
    RegraBA,
    RegraDoisDV,
    RegraDV,
    RegraSomaX10,
    Validador,
    pesos_decrescentes,
)

PESOS_9_2 = pesos_decrescentes(9)


# -------------------- MA, PI, CE, PB, SE --------------------
# Todos usam Módulo 11 (pesos 9-2). Se 10 ou 11 -> 0.
MA = RegraDV(UF.MA, PESOS_9_2, prefixos=("12",), mascara="########-#")
PI = RegraDV(UF.PI, PESOS_9_2)
CE = RegraDV(UF.CE, PESOS_9_2, mascara="########-#")
PB = RegraDV(UF.PB, PESOS_9_2, mascara="########-#")
SE = RegraDV(UF.SE, PESOS_9_2, mascara="########-#")

# -------------------- RN (Rio Grande do Norte) --------------------
# Regra peculiar: (Soma * 10) % 11. Se resto 10, DV é 0.
RN = PorTamanho(
    UF.RN,
    RegraSomaX10(UF.RN, PESOS_9_2, prefixos=("20",), mascara="##.###.###-#"),
    RegraSomaX10(UF.RN, pesos_decrescentes(10), prefixos=("20",), mascara="##.#.###.###-#"),
)

# -------------------- AL (Alagoas) --------------------
AL = RegraAL(UF.AL, PESOS_9_2, prefixos=("24",))

# -------------------- PE (Pernambuco) --------------------
PE = PorTamanho(
    UF.PE,
    RegraDoisDV(UF.PE, pesos_decrescentes(8), PESOS_9_2, remap_zero, mascara="#######-##"),
    RegraDV(UF.PE, [5, 4, 3, 2, 1, 9, 8, 7, 6, 5, 4, 3, 2], remap_menos_dez, mascara="##.#.###.#######-#"),
)

# -------------------- BA (Bahia) --------------------
BA = PorTamanho(
    UF.BA,
    RegraBA(UF.BA, 8, mascara="######-##"),
    RegraBA(UF.BA, 9, mascara="#######-##"),
)


VALIDADORES_NE: Dict[UF, Validador] = {
    UF.AL: AL,
    UF.BA: BA,
    UF.CE: CE,
    UF.MA: MA,
    UF.PB: PB,
    UF.PE: PE,
    UF.PI: PI,
    UF.RN: RN,
    UF.SE: SE,
}
