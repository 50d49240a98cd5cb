# fiscalbr/modelos.py
# Registros imutáveis devolvidos pelas operações de parse.

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class BoletoKind(str, Enum):
    BANKING = "banking"
    CONVENIO = "convenio"


class UF(str, Enum):
    AC = "ac"
    AL = "al"
    AM = "am"
    AP = "ap"
    BA = "ba"
    CE = "ce"
    DF = "df"
    ES = "es"
    GO = "go"
    MA = "ma"
    MG = "mg"
    MS = "ms"
    MT = "mt"
    PA = "pa"
    PB = "pb"
    PE = "pe"
    PI = "pi"
    PR = "pr"
    RJ = "rj"
    RN = "rn"
    RO = "ro"
    RR = "rr"
    RS = "rs"
    SC = "sc"
    SE = "se"
    SP = "sp"
    TO = "to"


# ========================= Boleto =========================
class Boleto(BaseModel):
    """
    Boleto decodificado. `kind` indica quais campos são preenchidos:
    bancário -> bank_code, currency_code, due_date;
    convênio -> segment, value_type, company_id.
    """

    model_config = ConfigDict(frozen=True)

    kind: BoletoKind
    raw: str
    barcode: str = Field(min_length=44, max_length=44)
    line: str
    bank_code: Optional[str] = None
    currency_code: Optional[str] = None
    segment: Optional[str] = None
    value_type: Optional[str] = None
    company_id: Optional[str] = None
    amount_cents: Optional[int] = None
    due_date: Optional[date] = None
    free_field: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amount(self) -> Optional[Decimal]:
        """Valor em reais; None significa 'qualquer valor'."""
        if self.amount_cents is None:
            return None
        return Decimal(self.amount_cents).scaleb(-2)

    @property
    def is_banking(self) -> bool:
        return self.kind is BoletoKind.BANKING

    @property
    def is_convenio(self) -> bool:
        return self.kind is BoletoKind.CONVENIO


# ========================= IE =========================
class IE(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: UF
    raw: str
    formatted: str = ""

    @model_validator(mode="before")
    @classmethod
    def _formatted_padrao(cls, data):
        # formatted vazio cai para o raw
        if isinstance(data, dict) and not data.get("formatted"):
            data = {**data, "formatted": data.get("raw", "")}
        return data
