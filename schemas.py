from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from datetime import datetime, timezone
from typing import Any, List, Optional
from enum import Enum

from errors import DadosInvalidos

# ==================== ENUMERAÇÕES ====================

class Sexo(str, Enum):
    F = "F"
    M = "M"
    OUTRO = "Outro"
    PREFERE_NAO_DIZER = "Prefere não dizer"

class SimNao(str, Enum):
    SIM = "Sim"
    NAO = "Não"

class Periodo(str, Enum):
    MANHA = "Manhã"
    TARDE = "Tarde"

class MovimentoLoja(str, Enum):
    MOVIMENTADA = "Movimentada"
    POUCO_MOVIMENTO = "Pouco movimento"

IDADE_MINIMA = 18
IDADE_MAXIMA = 120
MOTIVO_MAX_LENGTH = 500

# ==================== SCHEMAS DE RESPOSTA HZ ====================

class InsertHzVaccineResponse(BaseModel):
    """Schema de entrada de uma resposta do questionário (sem id)."""
    sexo: Sexo
    idade: int = Field(..., ge=IDADE_MINIMA, le=IDADE_MAXIMA, description="Idade em anos")
    familia_hz: SimNao
    conhece_vacina: SimNao
    aceitou_explicacao: SimNao
    interesse_vacina: SimNao
    interesse_vacinar: SimNao
    vacinou_local: SimNao
    retornar_outro_dia: SimNao
    motivo_nao_vacinar: str = Field("", max_length=MOTIVO_MAX_LENGTH, description="Motivo para não vacinar (opcional)")
    periodo: Periodo
    movimento_loja: MovimentoLoja

    @field_validator("idade", mode="before")
    @classmethod
    def idade_numerica(cls, value):
        # Só números; 45.0 vira 45, 45.5 é rejeitado adiante
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("int_type", "Idade deve ser um número inteiro")
        return value

    @field_validator("motivo_nao_vacinar", mode="before")
    @classmethod
    def motivo_vazio(cls, value):
        # Ausente e nulo viram string vazia
        return "" if value is None else value


class HzVaccineResponseOut(InsertHzVaccineResponse):
    """Schema de resposta persistida (com id)."""
    id: int

    class Config:
        from_attributes = True

# ==================== SCHEMAS DE ERRO ====================

class FieldError(BaseModel):
    field: str
    message: str

class ValidationErrorResponse(BaseModel):
    message: str = "Dados inválidos"
    errors: List[FieldError]

class MessageResponse(BaseModel):
    """Schema genérico de resposta com mensagem."""
    message: str
    status_code: Optional[int] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

# ==================== VALIDAÇÃO ====================

_MENSAGENS_CAMPO = {
    ("idade", "greater_than_equal"): f"Idade deve ser no mínimo {IDADE_MINIMA} anos",
    ("idade", "less_than_equal"): f"Idade deve ser no máximo {IDADE_MAXIMA} anos",
    ("idade", "int_type"): "Idade deve ser um número inteiro",
    ("idade", "int_from_float"): "Idade deve ser um número inteiro",
    ("motivo_nao_vacinar", "string_too_long"): f"Motivo deve ter no máximo {MOTIVO_MAX_LENGTH} caracteres",
    ("motivo_nao_vacinar", "string_type"): "Motivo deve ser um texto",
}


def _descrever(valor: Any) -> str:
    if valor is None:
        return "null"
    if isinstance(valor, str):
        return f"'{valor}'"
    if isinstance(valor, bool):
        return "booleano"
    if isinstance(valor, (int, float)):
        return "número"
    if isinstance(valor, (list, tuple)):
        return "lista"
    if isinstance(valor, dict):
        return "objeto"
    return type(valor).__name__


def _mensagem(campo: str, erro: dict) -> str:
    tipo = erro["type"]
    if (campo, tipo) in _MENSAGENS_CAMPO:
        return _MENSAGENS_CAMPO[(campo, tipo)]
    if tipo == "missing":
        return "Campo obrigatório"
    if tipo == "enum":
        esperado = erro.get("ctx", {}).get("expected", "")
        return f"Valor inválido. Esperado {esperado}, recebido {_descrever(erro.get('input'))}"
    if tipo == "model_type":
        return "Os dados devem ser um objeto"
    return erro["msg"]


def format_validation_errors(exc: ValidationError) -> List[FieldError]:
    """Converte os erros do pydantic em pares (campo, mensagem) na ordem dos campos."""
    erros = []
    for erro in exc.errors():
        campo = ".".join(str(parte) for parte in erro["loc"])
        erros.append(FieldError(field=campo, message=_mensagem(campo, erro)))
    return erros


def validate_hz_vaccine_response(payload: Any) -> InsertHzVaccineResponse:
    """
    Valida um payload arbitrário e devolve a resposta pronta para inserção.

    Todos os campos são verificados numa única passada; se algum falhar,
    levanta DadosInvalidos com a lista completa de erros.
    """
    try:
        return InsertHzVaccineResponse.model_validate(payload)
    except ValidationError as e:
        raise DadosInvalidos(format_validation_errors(e)) from e
