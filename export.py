from typing import Iterable, Sequence

from errors import NothingToExport

EXPORT_FILENAME = "dados-vacina-hz.csv"

# Cabeçalhos do CSV em português
HEADERS = [
    "ID",
    "Sexo",
    "Idade",
    "Família teve HZ",
    "Conhece vacina",
    "Aceitou explicação",
    "Interesse vacina",
    "Interesse vacinar",
    "Vacinou local",
    "Retornar outro dia",
    "Motivo não vacinar",
    "Período",
    "Movimento loja",
]


def _valor(campo) -> str:
    # Enums gravam o valor literal
    return str(getattr(campo, "value", campo))


def response_row(resposta) -> list:
    """Valores de uma resposta na mesma ordem de HEADERS."""
    return [
        resposta.id,
        _valor(resposta.sexo),
        resposta.idade,
        _valor(resposta.familia_hz),
        _valor(resposta.conhece_vacina),
        _valor(resposta.aceitou_explicacao),
        _valor(resposta.interesse_vacina),
        _valor(resposta.interesse_vacinar),
        _valor(resposta.vacinou_local),
        _valor(resposta.retornar_outro_dia),
        resposta.motivo_nao_vacinar or "",
        _valor(resposta.periodo),
        _valor(resposta.movimento_loja),
    ]


def format_csv(respostas: Iterable) -> str:
    """
    Gera o CSV com uma linha de cabeçalho e uma linha por resposta.

    Todo valor vai entre aspas duplas; aspas e vírgulas dentro do texto
    não são escapadas.
    """
    linhas = [",".join(HEADERS)]
    for resposta in respostas:
        linhas.append(",".join(f'"{campo}"' for campo in response_row(resposta)))
    return "\n".join(linhas)


def build_export(respostas: Sequence) -> str:
    if not respostas:
        raise NothingToExport("Nenhum dado encontrado para exportar")
    return format_csv(respostas)
