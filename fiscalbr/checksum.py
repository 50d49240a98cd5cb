# fiscalbr/checksum.py
# Algoritmos de dígito verificador usados por boletos (FEBRABAN) e pelas
# Inscrições Estaduais: Módulo 9, Módulo 10 e um Módulo 11 parametrizado.
#
# Todas as funções são puras e totais: entrada não numérica ou curta demais
# devolve None (calculate) ou False (valid), nunca uma exceção.

from __future__ import annotations

from typing import Callable, Optional, Sequence

Remap = Callable[[int], int]


# ==========================
#  FUNÇÕES AUXILIARES
# ==========================
def _so_digitos(s) -> bool:
    """True se `s` é uma string não vazia só com dígitos ASCII 0-9."""
    return isinstance(s, str) and s != "" and s.isascii() and s.isdigit()


def _to_int_list(s: str) -> list[int]:
    return [int(c) for c in s]


def _weighted_sum(nums: Sequence[int], weights: Sequence[int]) -> int:
    """Soma ponderada, pesos alinhados da esquerda para a direita."""
    return sum(n * w for n, w in zip(nums, weights))


def _separa_dv(s) -> Optional[tuple[str, int]]:
    if not _so_digitos(s) or len(s) < 2:
        return None
    return s[:-1], int(s[-1])


# ==========================
#  MÓDULO 9
# ==========================
def mod9_calculate(payload: str) -> Optional[int]:
    """Dígito i (1-indexado, esquerda→direita) vezes i; DV = soma mod 9."""
    if not _so_digitos(payload):
        return None
    pesos = range(1, len(payload) + 1)
    return _weighted_sum(_to_int_list(payload), pesos) % 9


def mod9_valid(value: str) -> bool:
    partes = _separa_dv(value)
    if partes is None:
        return False
    return mod9_calculate(partes[0]) == partes[1]


# ==========================
#  MÓDULO 10
# ==========================
def mod10_calculate(payload: str) -> Optional[int]:
    """
    Da direita para a esquerda, pesos 2, 1, 2, 1...
    Produtos >= 10 têm seus dígitos somados (12 -> 1 + 2).
    DV = (10 - soma mod 10) mod 10.
    """
    if not _so_digitos(payload):
        return None
    total = 0
    for i, d in enumerate(reversed(_to_int_list(payload))):
        prod = d * (2 if i % 2 == 0 else 1)
        total += prod // 10 + prod % 10
    return (10 - total % 10) % 10


def mod10_valid(value: str) -> bool:
    partes = _separa_dv(value)
    if partes is None:
        return False
    return mod10_calculate(partes[0]) == partes[1]


# ==========================
#  MÓDULO 11
# ==========================
# O remap recebe o resultado bruto `11 - (soma mod 11)`, sempre em 1..11.

def remap_bancario(resultado: int) -> int:
    """Boleto bancário: 0, 1, 10 e 11 viram 1."""
    return 1 if resultado in (0, 1, 10, 11) else resultado


def remap_convenio(resultado: int) -> int:
    """Arrecadação (convênio): 0, 10 e 11 viram 0."""
    return 0 if resultado in (0, 10, 11) else resultado


def remap_zero(resultado: int) -> int:
    """10 e 11 viram 0 (equivale a resto 0 ou 1 -> 0)."""
    return 0 if resultado >= 10 else resultado


def remap_menos_dez(resultado: int) -> int:
    """Resultados acima de 9 perdem 10 (RO, PE legado)."""
    return resultado - 10 if resultado > 9 else resultado


def remap_unidade_resto(resultado: int) -> int:
    """SP: o DV é o algarismo das unidades do resto."""
    return (11 - resultado) % 10


def febraban_weights(n: int) -> list[int]:
    """Pesos 2..9 em ciclo a partir da direita, devolvidos na ordem esquerda→direita."""
    return [(i % 8) + 2 for i in range(n)][::-1]


def mod11(payload: str, pesos: Sequence[int], remap: Remap, base: int = 0) -> Optional[int]:
    """
    Módulo 11 genérico.
    `pesos` deve ter o mesmo tamanho do payload; `base` é somado à soma
    ponderada antes do resto (usado pelo Amapá).
    """
    if not _so_digitos(payload) or len(pesos) != len(payload):
        return None
    soma = base + _weighted_sum(_to_int_list(payload), pesos)
    return remap(11 - soma % 11)


def mod11_valid_with(payload: str, expected, pesos: Sequence[int], remap: Remap, base: int = 0) -> bool:
    dv = mod11(payload, pesos, remap, base)
    if dv is None:
        return False
    try:
        return dv == int(expected)
    except (TypeError, ValueError):
        return False


# --- Variantes FEBRABAN ---
def mod11_banking_calculate(payload: str) -> Optional[int]:
    if not _so_digitos(payload):
        return None
    return mod11(payload, febraban_weights(len(payload)), remap_bancario)


def mod11_banking_valid(value: str) -> bool:
    partes = _separa_dv(value)
    if partes is None:
        return False
    return mod11_banking_calculate(partes[0]) == partes[1]


def mod11_convenio_calculate(payload: str) -> Optional[int]:
    if not _so_digitos(payload):
        return None
    return mod11(payload, febraban_weights(len(payload)), remap_convenio)


def mod11_convenio_valid(value: str) -> bool:
    partes = _separa_dv(value)
    if partes is None:
        return False
    return mod11_convenio_calculate(partes[0]) == partes[1]
