"""Tests dos algoritmos de dígito verificador (Módulos 9, 10 e 11)."""
import pytest

from fiscalbr import checksum as ck


# ==========================
#  MÓDULO 10
# ==========================
def test_mod10_exemplos_febraban():
    assert ck.mod10_calculate("341911012") == 1
    assert ck.mod10_calculate("3456788005") == 8
    assert ck.mod10_calculate("237933812") == 8
    assert ck.mod10_calculate("0000000000") == 0


def test_mod10_valid():
    assert ck.mod10_valid("3419110121")
    assert ck.mod10_valid("34567880058")
    assert ck.mod10_valid("2379338128")
    assert not ck.mod10_valid("3419110129")
    assert not ck.mod10_valid("2379338121")


@pytest.mark.parametrize("entrada", ["", "5", "12a4", None, "１２３"])
def test_mod10_entrada_invalida_nao_lanca(entrada):
    assert not ck.mod10_valid(entrada)


def test_mod10_calculate_entrada_invalida():
    assert ck.mod10_calculate("") is None
    assert ck.mod10_calculate("12x") is None


# ==========================
#  MÓDULO 9
# ==========================
@pytest.mark.parametrize("payload,dv", [
    ("24006628", 1),
    ("24001755", 6),
    ("24003429", 0),
    ("24001360", 3),
    ("24008266", 8),
    ("24006153", 6),
    ("24007356", 2),
])
def test_mod9_exemplos_roraima(payload, dv):
    assert ck.mod9_calculate(payload) == dv
    assert ck.mod9_valid(payload + str(dv))


def test_mod9_invalido():
    assert not ck.mod9_valid("240066282")
    assert not ck.mod9_valid("")
    assert ck.mod9_calculate("abc") is None


# ==========================
#  MÓDULO 11
# ==========================
def test_febraban_weights_ciclam_da_direita():
    assert ck.febraban_weights(4) == [5, 4, 3, 2]
    assert ck.febraban_weights(10) == [3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def test_mod11_bancario_zeros_vira_1():
    assert ck.mod11_banking_calculate("0" * 43) == 1


@pytest.mark.parametrize("payload", ["0" * 43, "1" * 43, "9" * 43, "5" * 43,
                                     "1234567890123456789012345678901234567890123"])
def test_mod11_faixa_de_saida(payload):
    """Bancário nunca devolve 0 (faixa 1-9); convênio fica em 0-9."""
    assert 1 <= ck.mod11_banking_calculate(payload) <= 9
    assert 0 <= ck.mod11_convenio_calculate(payload) <= 9


def test_mod11_pesos_importam():
    assert ck.mod11_banking_calculate("10000000") != ck.mod11_banking_calculate("00000001")


def test_mod11_anexa_e_valida():
    for payload in ("0" * 43, "1" * 43, "1234567890123456789012345678901234567890123"):
        assert ck.mod11_banking_valid(payload + str(ck.mod11_banking_calculate(payload)))
        assert ck.mod11_convenio_valid(payload + str(ck.mod11_convenio_calculate(payload)))


def test_mod11_dv_errado():
    payload = "0" * 43
    assert not ck.mod11_banking_valid(payload + "9")
    assert not ck.mod11_valid_with(payload, "9", ck.febraban_weights(43), ck.remap_bancario)
    assert ck.mod11_valid_with(payload, "1", ck.febraban_weights(43), ck.remap_bancario)


def test_mod11_pesos_de_tamanho_diferente():
    assert ck.mod11("123", [2, 3], ck.remap_zero) is None


def test_mod11_base_somada():
    # 11 - ((5 + 0) % 11) = 6
    assert ck.mod11("00", [9, 8], ck.remap_zero, base=5) == 6


# ==========================
#  REMAPS
# ==========================
def test_remaps():
    assert [ck.remap_bancario(r) for r in (1, 5, 10, 11)] == [1, 5, 1, 1]
    assert [ck.remap_convenio(r) for r in (1, 5, 10, 11)] == [1, 5, 0, 0]
    assert [ck.remap_zero(r) for r in (1, 9, 10, 11)] == [1, 9, 0, 0]
    assert [ck.remap_menos_dez(r) for r in (1, 9, 10, 11)] == [1, 9, 0, 1]
    # resto 1 -> 1, resto 10 -> 0, resto 0 -> 0
    assert [ck.remap_unidade_resto(r) for r in (10, 1, 11)] == [1, 0, 0]


def test_remap_zero_equivale_soma_x10():
    """(soma * 10) % 11 com 10 -> 0 dá o mesmo DV que 10/11 -> 0."""
    pesos = [9, 8, 7, 6, 5, 4, 3, 2]
    for payload in ("24000004", "20040040", "12345678", "99999999", "00000000"):
        soma = sum(int(d) * p for d, p in zip(payload, pesos))
        x10 = (soma * 10) % 11
        assert ck.mod11(payload, pesos, ck.remap_zero) == (0 if x10 == 10 else x10)
