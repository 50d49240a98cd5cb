# fiscalbr/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    data_referencia: Optional[date]
    janela_anos: int
    log_level: str

    def hoje(self) -> date:
        """Data de referência para o fator de vencimento: a fixada ou a de hoje."""
        return self.data_referencia or date.today()


def _parse_data(valor: Optional[str]) -> Optional[date]:
    if not valor:
        return None
    return datetime.fromisoformat(valor.strip()).date()


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        data_referencia=_parse_data(os.getenv("FISCALBR_DATA_REFERENCIA")),
        janela_anos=int(os.getenv("FISCALBR_JANELA_ANOS", "5")),
        log_level=os.getenv("FISCALBR_LOG_LEVEL", "WARNING").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def reset_settings() -> None:
    get_settings.cache_clear()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Anexa um StreamHandler ao logger do pacote no nível configurado."""
    nivel = (level or get_settings().log_level).upper()
    logger = logging.getLogger("fiscalbr")
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(nivel)
    return logger
