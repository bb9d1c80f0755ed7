# tests/test_report.py

import pytest

from rescisao.calculations import calculate_termination
from rescisao.models import NoticeType, TerminationReason
from rescisao.report import DESCONTO, INFORMATIVO, breakdown_to_dataframe, build_breakdown
from rescisao.shared.utils import format_brl


@pytest.mark.parametrize(
    "valor, esperado",
    [
        (0, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (1234567.891, "R$ 1.234.567,89"),
        (-3500, "-R$ 3.500,00"),
        (-1.5, "-R$ 1,50"),
    ],
)
def test_format_brl(valor, esperado):
    assert format_brl(valor) == esperado


def test_demonstrativo_sem_justa_causa(criar_inputs):
    itens = build_breakdown(calculate_termination(criar_inputs()))
    labels = [i.label for i in itens]

    assert labels[0] == "Saldo de Salário"
    assert "Aviso Prévio Indenizado (36 dias)" in labels
    assert "Multa FGTS" in labels
    assert "Férias Vencidas + 1/3" not in labels
    assert itens[-1].kind == INFORMATIVO
    assert itens[-1].value == 8500.0


def test_demonstrativo_com_desconto_de_aviso(criar_inputs):
    resultado = calculate_termination(
        criar_inputs(reason=TerminationReason.RESIGNATION, notice_type=NoticeType.WAIVED)
    )
    descontos = [i for i in build_breakdown(resultado) if i.kind == DESCONTO]

    assert len(descontos) == 1
    assert descontos[0].value == -3500.0


def test_demonstrativo_em_dataframe(criar_inputs):
    df = breakdown_to_dataframe(build_breakdown(calculate_termination(criar_inputs())))

    assert list(df.columns) == ["Verba", "Tipo", "Valor"]
    assert df.iloc[0]["Valor"] == "R$ 1.750,00"
    assert df.iloc[0]["Tipo"] == "Provento"


def test_dataframe_vazio():
    assert breakdown_to_dataframe([]).empty
