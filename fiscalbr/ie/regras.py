# fiscalbr/ie/regras.py
# Regras genéricas de dígito verificador de Inscrição Estadual.
#
# Cada UF é descrita por um objeto de regra (tamanho, pesos, remap,
# prefixos, máscara) em vez de uma função escrita à mão. As UFs cujo
# algoritmo publicado não cabe nos formatos genéricos têm uma subclasse
# própria com a mesma interface: validate(ie) -> Result, format(ie) -> str.

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple, Union

from ..checksum import Remap, mod9_calculate, mod11, remap_zero
from ..erros import Err, ErrorCode, Ok, Reason, Result
from ..modelos import UF


# ==========================
#  FUNÇÕES AUXILIARES
# ==========================
def _to_int_list(s: str) -> list[int]:
    return [int(c) for c in s]


def _weighted_sum(nums: Sequence[int], weights: Sequence[int]) -> int:
    return sum(n * w for n, w in zip(nums, weights))


def _dv_mod11(total: int, zero_if: Tuple[int, ...] = (0, 1)) -> int:
    """Se resto em `zero_if`, DV é 0. Senão, 11 - resto."""
    resto = total % 11
    return 0 if resto in zero_if else 11 - resto


def pesos_decrescentes(maior: int) -> list[int]:
    """pesos_decrescentes(9) -> [9, 8, 7, 6, 5, 4, 3, 2]"""
    return list(range(maior, 1, -1))


def aplica_mascara(valor: str, mascara: Optional[str]) -> str:
    """
    Substitui cada '#' da máscara pelo próximo caractere do valor.
    Se a quantidade de '#' não bate com o tamanho, devolve o valor cru.
    """
    if not mascara or mascara.count("#") != len(valor):
        return valor
    chars = iter(valor)
    return "".join(next(chars) if ch == "#" else ch for ch in mascara)


# ==========================
#  REGRAS BASE
# ==========================
class Regra:
    """Interface comum. Subclasses implementam `_confere`."""

    def __init__(self, uf: UF, tamanho: int, prefixos: Sequence[str] = (), mascara: Optional[str] = None):
        self.uf = uf
        self.tamanho = tamanho
        self.prefixos = tuple(prefixos)
        self.mascara = mascara

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.uf.value}, tamanho={self.tamanho})"

    def validate(self, ie: str) -> Result:
        if len(ie) != self.tamanho:
            return Err(ErrorCode.INVALID_LENGTH)
        if not ie.isdigit():
            return Err(ErrorCode.INVALID_FORMAT)
        if self.prefixos and not ie.startswith(self.prefixos):
            return Err(ErrorCode.INVALID_PREFIX)
        motivo = self._verifica_estrutura(ie)
        if motivo is not None:
            return Err(motivo)
        if not self._confere(ie):
            return Err(ErrorCode.INVALID_CHECKSUM)
        return Ok()

    def format(self, ie: str) -> str:
        return aplica_mascara(ie, self.mascara)

    def _verifica_estrutura(self, ie: str) -> Optional[Reason]:
        return None

    def _confere(self, ie: str) -> bool:
        raise NotImplementedError


class RegraDV(Regra):
    """
    Um DV no último dígito, Módulo 11 com pesos esquerda→direita.
    Os pesos cobrem os dígitos imediatamente anteriores ao DV, então uma
    lista mais curta que o payload ignora os dígitos iniciais (RO 9 dígitos).
    """

    def __init__(self, uf: UF, pesos: Sequence[int], remap: Remap = remap_zero, tamanho: Optional[int] = None,
                 prefixos: Sequence[str] = (), mascara: Optional[str] = None):
        super().__init__(uf, tamanho or len(pesos) + 1, prefixos, mascara)
        self.pesos = list(pesos)
        self.remap = remap

    def _payload(self, ie: str) -> str:
        return ie[-1 - len(self.pesos):-1]

    def calcula_dv(self, ie: str) -> Optional[int]:
        return mod11(self._payload(ie), self.pesos, self.remap)

    def _confere(self, ie: str) -> bool:
        return self.calcula_dv(ie) == int(ie[-1])


class RegraDoisDV(Regra):
    """
    Dois DVs encadeados: o primeiro cobre ie[:len(pesos1)] e fica na posição
    seguinte; o segundo cobre ie[:len(pesos2)] (incluindo o primeiro DV).
    """

    def __init__(self, uf: UF, pesos1: Sequence[int], pesos2: Sequence[int], remap: Remap = remap_zero,
                 prefixos: Sequence[str] = (), mascara: Optional[str] = None):
        super().__init__(uf, len(pesos2) + 1, prefixos, mascara)
        self.pesos1 = list(pesos1)
        self.pesos2 = list(pesos2)
        self.remap = remap

    def _confere(self, ie: str) -> bool:
        n1, n2 = len(self.pesos1), len(self.pesos2)
        d1 = mod11(ie[:n1], self.pesos1, self.remap)
        if d1 != int(ie[n1]):
            return False
        return mod11(ie[:n2], self.pesos2, self.remap) == int(ie[n2])


class RegraMod9(Regra):
    """Módulo 9: peso i para o i-ésimo dígito (RR)."""

    def _confere(self, ie: str) -> bool:
        return mod9_calculate(ie[:-1]) == int(ie[-1])


class PorTamanho:
    """Combina regras da mesma UF com tamanhos diferentes."""

    def __init__(self, uf: UF, *regras: Regra):
        self.uf = uf
        self.regras: Dict[int, Regra] = {r.tamanho: r for r in regras}

    def __repr__(self) -> str:
        return f"PorTamanho({self.uf.value}, {sorted(self.regras)})"

    @property
    def tamanhos(self) -> list[int]:
        return sorted(self.regras)

    def validate(self, ie: str) -> Result:
        regra = self.regras.get(len(ie))
        if regra is None:
            return Err(ErrorCode.INVALID_LENGTH)
        return regra.validate(ie)

    def format(self, ie: str) -> str:
        regra = self.regras.get(len(ie))
        return regra.format(ie) if regra else ie


# ==========================
#  REGRAS ESPECÍFICAS
# ==========================
class RegraSomaX10(RegraDV):
    """AL e RN: DV = (soma * 10) mod 11, resto 10 -> 0."""

    def calcula_dv(self, ie: str) -> Optional[int]:
        soma = _weighted_sum(_to_int_list(self._payload(ie)), self.pesos)
        dv = (soma * 10) % 11
        return 0 if dv == 10 else dv


class RegraAL(RegraSomaX10):
    """O terceiro dígito é o tipo de empresa e só admite 0, 3, 5, 7 ou 8."""

    TIPOS = "03578"

    def _verifica_estrutura(self, ie: str) -> Optional[Reason]:
        if ie[2] not in self.TIPOS:
            return ErrorCode.INVALID_FORMAT
        return None


class RegraAM(RegraDV):
    """Soma < 11 -> DV = 11 - soma; senão resto 0/1 -> 0, demais 11 - resto."""

    def calcula_dv(self, ie: str) -> Optional[int]:
        soma = _weighted_sum(_to_int_list(self._payload(ie)), self.pesos)
        if soma < 11:
            return 11 - soma
        return _dv_mod11(soma)


class RegraAP(RegraDV):
    """
    Amapá: constantes p (somada ao total) e d (DV quando o resultado é 11)
    dependem da faixa numérica do payload.
    """

    FAIXAS = (
        (3000001, 3017000, 5, 0),
        (3017001, 3019022, 9, 1),
    )

    def _p_d(self, payload: str) -> Tuple[int, int]:
        valor = int(payload)
        for ini, fim, p, d in self.FAIXAS:
            if ini <= valor <= fim:
                return p, d
        return 0, 0

    def calcula_dv(self, ie: str) -> Optional[int]:
        payload = self._payload(ie)
        p, d = self._p_d(payload)
        resultado = 11 - (p + _weighted_sum(_to_int_list(payload), self.pesos)) % 11
        if resultado == 10:
            return 0
        if resultado == 11:
            return d
        return resultado


class RegraGO(RegraDV):
    """Na faixa 10103105..10119997, quando o DV calculado é 0 ou 1, aceita 0 ou 1."""

    FAIXA_ESPECIAL = (10103105, 10119997)

    def _confere(self, ie: str) -> bool:
        calculado = self.calcula_dv(ie)
        real = int(ie[-1])
        ini, fim = self.FAIXA_ESPECIAL
        if calculado in (0, 1) and ini <= int(self._payload(ie)) <= fim:
            return real in (0, 1)
        return calculado == real


class RegraTO(RegraDV):
    """Dígitos 3-4 são o tipo (01, 02, 03, 99) e ficam fora do cálculo."""

    TIPOS = ("01", "02", "03", "99")

    def _verifica_estrutura(self, ie: str) -> Optional[Reason]:
        if ie[2:4] not in self.TIPOS:
            return ErrorCode.INVALID_FORMAT
        return None

    def _payload(self, ie: str) -> str:
        return ie[0:2] + ie[4:10]


class RegraBA(Regra):
    """
    Bahia, 8 ou 9 dígitos. Módulo 10 ou 11 conforme o 1º (8 dígitos) ou
    2º (9 dígitos) dígito. O segundo DV é calculado primeiro, sobre o
    payload; o primeiro DV cobre payload + segundo DV.
    """

    DIGITOS_MOD10 = "0123458"

    def _modulo(self, ie: str) -> int:
        chave = ie[0] if self.tamanho == 8 else ie[1]
        return 10 if chave in self.DIGITOS_MOD10 else 11

    @staticmethod
    def _digito(payload: str, pesos: Sequence[int], modulo: int) -> int:
        resto = _weighted_sum(_to_int_list(payload), pesos) % modulo
        if resto == 0 or (modulo == 11 and resto == 1):
            return 0
        return modulo - resto

    def _confere(self, ie: str) -> bool:
        n = self.tamanho - 2
        payload, d1, d2 = ie[:n], int(ie[n]), int(ie[n + 1])
        modulo = self._modulo(ie)
        if self._digito(payload, pesos_decrescentes(n + 1), modulo) != d2:
            return False
        return self._digito(payload + str(d2), pesos_decrescentes(n + 2), modulo) == d1


class RegraMG(Regra):
    """
    D1: Módulo 10 sobre município + '0' + restante, pesos 1,2 alternados a
    partir da esquerda, somando os algarismos dos produtos.
    D2: Módulo 11 sobre os 12 primeiros dígitos.
    """

    PESOS_D2 = [3, 2, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2]

    @staticmethod
    def _d1(ie: str) -> int:
        payload = ie[0:3] + "0" + ie[3:11]
        soma = 0
        for i, d in enumerate(_to_int_list(payload)):
            prod = d * (1 if i % 2 == 0 else 2)
            soma += prod // 10 + prod % 10
        return (10 - soma % 10) % 10

    def _confere(self, ie: str) -> bool:
        if self._d1(ie) != int(ie[11]):
            return False
        return _dv_mod11(_weighted_sum(_to_int_list(ie[:12]), self.PESOS_D2)) == int(ie[12])


class RegraSPRural(Regra):
    """Produtor rural de SP: 'P' + 12 dígitos, só o 1º DV (posição 9) é conferido."""

    def __init__(self, uf: UF, pesos: Sequence[int], remap: Remap, mascara: Optional[str] = None):
        super().__init__(uf, 13, (), mascara)
        self.pesos = list(pesos)
        self.remap = remap

    def validate(self, ie: str) -> Result:
        if len(ie) != self.tamanho:
            return Err(ErrorCode.INVALID_LENGTH)
        if not ie.startswith("P") or not ie[1:].isdigit():
            return Err(ErrorCode.INVALID_FORMAT)
        if not self._confere(ie):
            return Err(ErrorCode.INVALID_CHECKSUM)
        return Ok()

    def format(self, ie: str) -> str:
        if not ie.startswith("P"):
            return ie
        return aplica_mascara(ie[1:], self.mascara)

    def _confere(self, ie: str) -> bool:
        return mod11(ie[1:9], self.pesos, self.remap) == int(ie[9])


Validador = Union[Regra, PorTamanho]
