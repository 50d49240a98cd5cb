"""Tests da classificação e do despacho de boletos pela API pública."""
from datetime import date
from decimal import Decimal

import pytest

import fiscalbr
from fiscalbr.boleto import Forma, detect_type
from fiscalbr.erros import ErrorCode
from fiscalbr.modelos import BoletoKind

REFERENCIA = date(2025, 6, 1)
LINHA_AGUA = "846600000000439300481009011290918405925127380374"
BARRAS_AGUA = "84660000000439300481000112909184092512738037"


@pytest.mark.parametrize("digits,esperado", [
    ("8" + "0" * 43, (BoletoKind.CONVENIO, Forma.BARCODE)),
    ("0" * 44, (BoletoKind.BANKING, Forma.BARCODE)),
    ("0" * 47, (BoletoKind.BANKING, Forma.LINE)),
    ("8" * 47, (BoletoKind.BANKING, Forma.LINE)),
    ("8" + "0" * 47, (BoletoKind.CONVENIO, Forma.LINE)),
])
def test_detect_type(digits, esperado):
    assert detect_type(digits).value == esperado


def test_48_digitos_sem_8_e_tipo_desconhecido():
    assert detect_type("9" + "0" * 47).error == ErrorCode.UNKNOWN_TYPE
    assert fiscalbr.validate_boleto("9" + "0" * 47).error == ErrorCode.UNKNOWN_TYPE
    assert fiscalbr.parse_boleto("9" + "0" * 47).error == ErrorCode.UNKNOWN_TYPE


def test_validate_boleto_bancario(linha_bancario):
    linha = linha_bancario(banco="001", valor="0000015000")
    assert fiscalbr.validate_boleto(linha).ok
    assert fiscalbr.validate_boleto(linha)


def test_validate_boleto_com_pontuacao():
    formatada = "84660000000-0 43930048100-9 01129091840-5 92512738037-4"
    assert fiscalbr.validate_boleto(formatada).ok
    assert fiscalbr.parse_boleto(formatada).unwrap().amount == Decimal("43.93")


def test_campo_1_errado():
    res = fiscalbr.validate_boleto("0019000000" + "0" * 37)
    assert not res
    assert res.error == (ErrorCode.INVALID_FIELD_CHECKSUM, 1)


@pytest.mark.parametrize("entrada,motivo", [
    ("", ErrorCode.INVALID_FORMAT),
    ("123", ErrorCode.INVALID_LENGTH),
    ("A" + "0" * 47, ErrorCode.INVALID_FORMAT),
])
def test_erros_de_entrada(entrada, motivo):
    assert fiscalbr.validate_boleto(entrada).error == motivo


def test_parse_boleto_com_data_de_referencia(linha_bancario):
    linha = linha_bancario(banco="341", fator="1000", valor="0000000100")
    assert fiscalbr.parse_boleto(linha, reference_date=REFERENCIA).unwrap().due_date == date(2025, 2, 22)
    assert fiscalbr.parse_boleto(linha, reference_date=date(2001, 1, 1)).unwrap().due_date == date(2000, 7, 3)


def test_parse_boleto_barras_bancario(barras_bancario):
    barras = barras_bancario(banco="748", valor="0000000001")
    boleto = fiscalbr.parse_boleto(barras, reference_date=REFERENCIA).unwrap()
    assert boleto.is_banking
    assert not boleto.is_convenio
    assert boleto.amount == Decimal("0.01")


def test_parse_boleto_convenio():
    boleto = fiscalbr.parse_boleto(BARRAS_AGUA).unwrap()
    assert boleto.is_convenio
    assert boleto.segment == "4"
    assert boleto.bank_code is None


# ==========================
#  CONVERSÃO PELA API
# ==========================
def test_boleto_to_barcode_e_to_line():
    assert fiscalbr.boleto_to_barcode(LINHA_AGUA).value == BARRAS_AGUA
    assert fiscalbr.boleto_to_barcode(BARRAS_AGUA).value == BARRAS_AGUA
    assert fiscalbr.boleto_to_line(BARRAS_AGUA).value == LINHA_AGUA
    assert fiscalbr.boleto_to_line(LINHA_AGUA).value == LINHA_AGUA


def test_conversao_bancario(barras_bancario):
    barras = barras_bancario(banco="033", fator="2000", valor="0000004321", livre="5" * 25)
    linha = fiscalbr.boleto_to_line(barras).unwrap()
    assert len(linha) == 47
    assert fiscalbr.boleto_to_barcode(linha).unwrap() == barras


def test_conversao_de_entrada_invalida():
    assert fiscalbr.boleto_to_barcode("0019000000" + "0" * 37).error == (ErrorCode.INVALID_FIELD_CHECKSUM, 1)
    assert fiscalbr.boleto_to_line("9" + "0" * 47).error == ErrorCode.UNKNOWN_TYPE


def test_boleto_imutavel(linha_bancario):
    boleto = fiscalbr.parse_boleto(linha_bancario(), reference_date=REFERENCIA).unwrap()
    with pytest.raises(Exception):
        boleto.bank_code = "999"


def test_model_dump_inclui_valor(linha_bancario):
    boleto = fiscalbr.parse_boleto(linha_bancario(valor="0000015000"), reference_date=REFERENCIA).unwrap()
    dados = boleto.model_dump()
    assert dados["amount"] == Decimal("150.00")
    assert dados["amount_cents"] == 15000
    assert dados["kind"] == BoletoKind.BANKING
