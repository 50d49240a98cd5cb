# fiscalbr/ie/sul.py
# Inscrição Estadual – Região Sul
# PR (10, 2 DVs), RS (10), SC (9)

from typing import Dict

from ..checksum import remap_zero
from ..modelos import UF
from .regras import RegraDoisDV, RegraDV, Validador, pesos_decrescentes

# -------------------- PR (Paraná) --------------------
PR = RegraDoisDV(UF.PR, [3, 2, 7, 6, 5, 4, 3, 2], [4, 3, 2, 7, 6, 5, 4, 3, 2], remap_zero, mascara="###.#####-##")

# -------------------- RS (Rio Grande do Sul) --------------------
RS = RegraDV(UF.RS, [2, 9, 8, 7, 6, 5, 4, 3, 2], mascara="###/#######")

# -------------------- SC (Santa Catarina) --------------------
SC = RegraDV(UF.SC, pesos_decrescentes(9), mascara="###.###.###")


VALIDADORES_SUL: Dict[UF, Validador] = {
    UF.PR: PR,
    UF.RS: RS,
    UF.SC: SC,
}
