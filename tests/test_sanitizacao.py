"""Tests da limpeza de entrada de boletos e IEs."""
import pytest

from fiscalbr.erros import ErrorCode
from fiscalbr.sanitizacao import limpar, sanitize_boleto, sanitize_ie


def test_limpar_remove_pontuacao():
    assert limpar("23793.38128 60000-0/00") == "237933812860000000"
    assert limpar("a\tb\nc") == "abc"


# ==========================
#  BOLETO
# ==========================
def test_boleto_com_pontuacao():
    bruto = "00190.00000 00000.000000 00000.000000 0 00000000000000"
    res = sanitize_boleto(bruto)
    assert res.ok
    assert res.value == "0019000000" + "0" * 37


@pytest.mark.parametrize("entrada", ["", "   ", ".-/", None, 12345])
def test_boleto_vazio_ou_nao_texto(entrada):
    assert sanitize_boleto(entrada).error == ErrorCode.INVALID_FORMAT


@pytest.mark.parametrize("n", [1, 43, 45, 46, 49, 60])
def test_boleto_tamanho_errado(n):
    assert sanitize_boleto("1" * n).error == ErrorCode.INVALID_LENGTH


def test_boleto_letra_no_meio():
    """47 dígitos válidos em quantidade, mas com uma letra sobrando."""
    assert sanitize_boleto("1" * 20 + "X" + "1" * 27).error == ErrorCode.INVALID_FORMAT


@pytest.mark.parametrize("n", [44, 47, 48])
def test_boleto_tamanhos_aceitos(n):
    assert sanitize_boleto("8" * n).value == "8" * n


# ==========================
#  IE
# ==========================
def test_ie_produtor_rural():
    res = sanitize_ie("P-01100424.3/002")
    assert res.value == "P011004243002"


def test_ie_p_minusculo_vira_maiusculo():
    assert sanitize_ie("p-01100424.3/002").value == "P011004243002"


def test_ie_pontuada():
    assert sanitize_ie("110.042.490.114").value == "110042490114"


@pytest.mark.parametrize("entrada", ["", "12A4567890", "X12345678", "P12345678901X", "PP01100424300"])
def test_ie_formato_invalido(entrada):
    assert sanitize_ie(entrada).error == ErrorCode.INVALID_FORMAT


@pytest.mark.parametrize("entrada", ["1234567", "123456789012345", "P01100424300", "P0110042430021"])
def test_ie_tamanho_invalido(entrada):
    assert sanitize_ie(entrada).error == ErrorCode.INVALID_LENGTH


def test_ie_formato_antes_do_tamanho():
    """Curta e com letra: o formato é checado primeiro."""
    assert sanitize_ie("12A").error == ErrorCode.INVALID_FORMAT
