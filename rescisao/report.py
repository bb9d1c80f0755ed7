# rescisao/report.py
# Monta o demonstrativo (proventos / descontos) a partir do resultado do cálculo.

from typing import List

import pandas as pd

from .models import BreakdownItem, CalculationResults
from .shared.utils import format_brl

PROVENTO = "provento"
DESCONTO = "desconto"
INFORMATIVO = "informativo"


def build_breakdown(result: CalculationResults) -> List[BreakdownItem]:
    """
    Lista as verbas na ordem do termo de rescisão.
    Verbas zeradas são omitidas, exceto o saldo de salário.
    """
    details = result.details
    itens = [
        BreakdownItem(label="Saldo de Salário", value=result.salary_balance, kind=PROVENTO)
    ]

    opcionais = [
        ("13º Salário Proporcional", result.thirteenth_proportional),
        ("Férias Proporcionais", result.vacations_proportional),
        ("1/3 sobre Férias Proporcionais", result.vacations_one_third),
        ("Férias Vencidas + 1/3", result.vacations_overdue),
    ]
    if result.notice_indemnified > 0:
        opcionais.append(
            (f"Aviso Prévio Indenizado ({details.notice_days} dias)", result.notice_indemnified)
        )
    opcionais.append(("Multa FGTS", result.fgts_penalty))

    for label, valor in opcionais:
        if valor:
            itens.append(BreakdownItem(label=label, value=valor, kind=PROVENTO))

    if result.notice_indemnified < 0:
        itens.append(
            BreakdownItem(
                label="Desconto de Aviso Prévio não cumprido",
                value=result.notice_indemnified,
                kind=DESCONTO,
            )
        )

    if result.fgts_total_balance:
        itens.append(
            BreakdownItem(
                label="Saldo do FGTS (saque conforme o motivo)",
                value=result.fgts_total_balance,
                kind=INFORMATIVO,
            )
        )
    return itens


def breakdown_to_dataframe(itens: List[BreakdownItem]) -> pd.DataFrame:
    if not itens:
        return pd.DataFrame(columns=["Verba", "Tipo", "Valor"])

    df = pd.DataFrame(
        [{"Verba": i.label, "Tipo": i.kind.capitalize(), "Valor": i.value} for i in itens]
    )
    df["Valor"] = df["Valor"].apply(format_brl)
    return df
