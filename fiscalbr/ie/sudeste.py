# fiscalbr/ie/sudeste.py
# Inscrição Estadual – Região Sudeste
# ES (9), MG (13, Módulo 10 + Módulo 11), RJ (8), SP (12 ou produtor rural P + 12)

from typing import Dict

from ..checksum import remap_unidade_resto
from ..modelos import UF
from .regras import PorTamanho, RegraDoisDV, RegraDV, RegraMG, RegraSPRural, Validador, pesos_decrescentes

PESOS_SP_D1 = [1, 3, 4, 5, 6, 7, 8, 10]
PESOS_SP_D2 = [3, 2, 10, 9, 8, 7, 6, 5, 4, 3, 2]


# -------------------- ES (Espírito Santo) --------------------
ES = RegraDV(UF.ES, pesos_decrescentes(9))

# -------------------- MG (Minas Gerais) --------------------
MG = RegraMG(UF.MG, 13, mascara="###.###.###/####")

# -------------------- RJ (Rio de Janeiro) --------------------
RJ = RegraDV(UF.RJ, [2, 7, 6, 5, 4, 3, 2], mascara="##.###.##-#")

# -------------------- SP (São Paulo) --------------------
# Comércio/indústria: DV1 na posição 9 e DV2 na 12, ambos pelo algarismo das unidades do resto.
# Produtor rural: 'P' + 12 dígitos, apenas o DV1.
SP = PorTamanho(
    UF.SP,
    RegraDoisDV(UF.SP, PESOS_SP_D1, PESOS_SP_D2, remap_unidade_resto, mascara="###.###.###.###"),
    RegraSPRural(UF.SP, PESOS_SP_D1, remap_unidade_resto, mascara="P-########.#/###"),
)


VALIDADORES_SE: Dict[UF, Validador] = {
    UF.ES: ES,
    UF.MG: MG,
    UF.RJ: RJ,
    UF.SP: SP,
}
