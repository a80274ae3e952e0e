from typing import List


class HzApiError(Exception):
    # Base para falhas esperadas do domínio.
    pass


class DadosInvalidos(HzApiError):
    """Um ou mais campos não passaram na validação do schema."""

    def __init__(self, errors: List):
        self.errors = errors
        super().__init__(f"{len(errors)} campo(s) inválido(s)")


class StorageUnavailable(HzApiError):
    # O banco não conseguiu completar a leitura/escrita.
    pass


class NothingToExport(HzApiError):
    # Nenhuma resposta armazenada no momento da exportação.
    pass


class SyncFailure(HzApiError):
    # Falha ao sincronizar com o Google Sheets; nunca propagada ao cliente.
    pass
