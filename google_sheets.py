from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

import requests
from loguru import logger

from config import Settings
from errors import SyncFailure
from export import HEADERS, response_row

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"
SHEET_HEADERS = HEADERS + ["Data/Hora"]
TIMEZONE = ZoneInfo("America/Sao_Paulo")


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Data/hora no padrão pt-BR, fuso de São Paulo."""
    now = now or datetime.now(TIMEZONE)
    if now.tzinfo is not None:
        now = now.astimezone(TIMEZONE)
    return now.strftime("%d/%m/%Y, %H:%M:%S")


class GoogleSheetsService:
    """Cliente mínimo da API REST v4 do Google Sheets."""

    def __init__(self, api_key: str, spreadsheet_id: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.spreadsheet_id = spreadsheet_id
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, range_: str, suffix: str = "") -> str:
        return f"{SHEETS_API_URL}/{self.spreadsheet_id}/values/{range_}{suffix}"

    def _request(self, method: str, url: str, **kwargs) -> dict:
        params = kwargs.pop("params", {})
        params["key"] = self.api_key
        response = self.session.request(method, url, params=params, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response.json() if response.content else {}

    def initialize_sheet(self):
        """Escreve o cabeçalho se a planilha estiver vazia."""
        try:
            data = self._request("GET", self._url("A1:M1"))
            if not data.get("values"):
                self._add_headers()
        except requests.RequestException as e:
            logger.error(f"Erro ao inicializar Google Sheet: {str(e)}")
            raise SyncFailure("Falha ao inicializar Google Sheet") from e

    def _add_headers(self):
        self._request(
            "PUT",
            self._url("A1:N1"),
            params={"valueInputOption": "USER_ENTERED"},
            json={"values": [SHEET_HEADERS]},
        )

    def add_response(self, resposta, timestamp: Optional[str] = None):
        """Acrescenta uma resposta persistida como nova linha. Uma única tentativa."""
        values = response_row(resposta) + [timestamp or format_timestamp()]
        try:
            self._request(
                "POST",
                self._url("A:N", ":append"),
                params={"valueInputOption": "USER_ENTERED"},
                json={"values": [values]},
            )
        except requests.RequestException as e:
            logger.error(f"Erro ao adicionar dados no Google Sheets: {str(e)}")
            raise SyncFailure("Falha ao sincronizar com Google Sheets") from e

        logger.info(f"✅ Resposta {resposta.id} adicionada ao Google Sheets")


def initialize_google_sheets(config: Settings) -> Optional[GoogleSheetsService]:
    """Cria o serviço se as credenciais estiverem configuradas."""
    if not config.google_sheets_enabled:
        logger.warning("Integração com Google Sheets desativada: credenciais ausentes")
        return None

    return GoogleSheetsService(
        api_key=config.google_sheets_api_key,
        spreadsheet_id=config.google_sheets_spreadsheet_id,
        timeout=config.google_sheets_timeout,
    )
