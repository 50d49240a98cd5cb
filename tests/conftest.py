"""
Configuração do pytest e construtores de boletos válidos.

Os boletos de teste são montados a partir das próprias funções de DV,
então qualquer combinação de campos gera uma linha/código válido.
"""
import pytest

from fiscalbr.boleto import bancario, convenio
from fiscalbr.checksum import mod11_banking_calculate
from fiscalbr.config import reset_settings


def monta_barras_bancario(banco="001", moeda="9", fator="0000", valor="0000000000", livre="0" * 25):
    payload = banco + moeda + fator + valor + livre
    dv = mod11_banking_calculate(payload)
    return banco + moeda + str(dv) + fator + valor + livre


def monta_linha_bancario(**campos):
    return bancario.barcode_to_line(monta_barras_bancario(**campos))


def monta_barras_convenio(segmento="6", tipo_valor="6", valor="00000000000", empresa="00000000", livre="0" * 21):
    corpo = valor + empresa + livre
    dv = convenio.calculadora_dv(tipo_valor)("8" + segmento + tipo_valor + corpo)
    return "8" + segmento + tipo_valor + str(dv) + corpo


def monta_linha_convenio(**campos):
    return convenio.barcode_to_line(monta_barras_convenio(**campos))


def troca_digito(s: str, pos: int) -> str:
    """Troca o dígito na posição `pos` por outro (d + 1 mod 10)."""
    return s[:pos] + str((int(s[pos]) + 1) % 10) + s[pos + 1:]


# ==========================
#  FIXTURES
# ==========================
@pytest.fixture(autouse=True)
def settings_limpas(monkeypatch):
    """Isola cada teste das variáveis FISCALBR_* do ambiente."""
    for var in ("FISCALBR_DATA_REFERENCIA", "FISCALBR_JANELA_ANOS", "FISCALBR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def barras_bancario():
    return monta_barras_bancario


@pytest.fixture
def linha_bancario():
    return monta_linha_bancario


@pytest.fixture
def barras_convenio():
    return monta_barras_convenio


@pytest.fixture
def linha_convenio():
    return monta_linha_convenio


@pytest.fixture
def troca():
    return troca_digito
