import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Configurações da aplicação lidas do ambiente."""
    database_url: str
    log_file: str
    log_level: str
    google_sheets_api_key: Optional[str]
    google_sheets_spreadsheet_id: Optional[str]
    google_sheets_timeout: float

    @property
    def google_sheets_enabled(self) -> bool:
        return bool(self.google_sheets_api_key and self.google_sheets_spreadsheet_id)


def _timeout(valor: str) -> float:
    try:
        timeout = float(valor)
    except ValueError:
        raise ValueError(f"GOOGLE_SHEETS_TIMEOUT inválido: {valor!r}") from None
    if timeout <= 0:
        raise ValueError("GOOGLE_SHEETS_TIMEOUT deve ser maior que zero")
    return timeout


def get_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./hz_vaccine.db"),
        log_file=os.getenv("LOG_FILE", "logs/info.log"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        google_sheets_api_key=os.getenv("GOOGLE_SHEETS_API_KEY") or None,
        google_sheets_spreadsheet_id=os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID") or None,
        google_sheets_timeout=_timeout(os.getenv("GOOGLE_SHEETS_TIMEOUT", "10")),
    )


settings = get_settings()
