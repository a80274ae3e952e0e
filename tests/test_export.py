from types import SimpleNamespace

import pytest

from errors import NothingToExport
from export import HEADERS, build_export, format_csv

HEADER_LINE = (
    "ID,Sexo,Idade,Família teve HZ,Conhece vacina,Aceitou explicação,"
    "Interesse vacina,Interesse vacinar,Vacinou local,Retornar outro dia,"
    "Motivo não vacinar,Período,Movimento loja"
)


def resposta(id_=1, motivo=None, **kwargs):
    campos = dict(
        id=id_, sexo="F", idade=45, familia_hz="Sim", conhece_vacina="Não",
        aceitou_explicacao="Sim", interesse_vacina="Sim", interesse_vacinar="Sim",
        vacinou_local="Não", retornar_outro_dia="Sim", motivo_nao_vacinar=motivo,
        periodo="Manhã", movimento_loja="Movimentada",
    )
    campos.update(kwargs)
    return SimpleNamespace(**campos)


def test_cabecalho_fixo():
    assert ",".join(HEADERS) == HEADER_LINE


def test_sem_respostas_nada_para_exportar():
    with pytest.raises(NothingToExport):
        build_export([])


@pytest.mark.parametrize("n", [1, 2, 7])
def test_n_respostas_geram_n_mais_uma_linhas(n):
    csv = build_export([resposta(i) for i in range(1, n + 1)])
    linhas = csv.split("\n")
    assert len(linhas) == n + 1
    assert linhas[0] == HEADER_LINE


def test_todos_os_valores_entre_aspas():
    linha = format_csv([resposta()]).split("\n")[1]
    assert linha == (
        '"1","F","45","Sim","Não","Sim","Sim","Sim","Não","Sim","","Manhã","Movimentada"'
    )


def test_motivo_ausente_vira_vazio():
    linha = format_csv([resposta(motivo=None)]).split("\n")[1]
    assert "null" not in linha
    assert "None" not in linha
    assert ',"",' in linha


def test_aspas_e_virgulas_nao_sao_escapadas():
    # Comportamento herdado: o texto livre entra cru entre aspas
    linha = format_csv([resposta(motivo='caro, "muito" caro')]).split("\n")[1]
    assert '"caro, "muito" caro"' in linha
