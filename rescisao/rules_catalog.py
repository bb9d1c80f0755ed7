# rescisao/rules_catalog.py
from __future__ import annotations
from dataclasses import dataclass
from itertools import product
from typing import Dict, List, Tuple

from .models import NoticeType, TerminationReason


@dataclass(frozen=True)
class SeverancePolicy:
    commercial_month_days: int = 30  # saldo de salário e aviso usam mês comercial
    min_days_for_month: int = 15  # regra dos 15 dias para 13º e férias
    days_per_year: float = 365.25  # aproximação aceita para anos completos
    base_notice_days: int = 30  # Lei 12.506/2011
    notice_days_per_year: int = 3
    max_extra_notice_days: int = 60  # teto de 90 dias no total
    months_per_year: int = 12
    vacation_bonus_divisor: int = 3  # 1/3 constitucional


@dataclass(frozen=True)
class ReasonRule:
    label: str
    forfeits_proportionals: bool = False  # justa causa perde 13º e férias proporcionais
    fgts_penalty_pct: float = 0.0


@dataclass(frozen=True)
class NoticeRule:
    """
    Uma célula da tabela motivo x tipo de aviso.

    kind:
      - "none": sem valor de aviso;
      - "indemnity": (salário / 30) * dias de aviso * fraction;
      - "discount": -salário * fraction.
    """

    kind: str = "none"
    fraction: float = 1.0


POLICY = SeverancePolicy()

REASON_RULES: Dict[TerminationReason, ReasonRule] = {
    TerminationReason.WITHOUT_CAUSE: ReasonRule(
        "Demissão sem Justa Causa", fgts_penalty_pct=0.40
    ),
    TerminationReason.WITH_CAUSE: ReasonRule(
        "Demissão por Justa Causa", forfeits_proportionals=True
    ),
    TerminationReason.RESIGNATION: ReasonRule("Pedido de Demissão"),
    TerminationReason.AGREEMENT: ReasonRule(
        "Rescisão por Acordo (Art. 484-A)", fgts_penalty_pct=0.20
    ),
    TerminationReason.END_OF_CONTRACT: ReasonRule("Término de Contrato"),
}

NOTICE_LABELS: Dict[NoticeType, str] = {
    NoticeType.WORKED: "Trabalhado",
    NoticeType.INDEMNIFIED: "Indenizado",
    NoticeType.WAIVED: "Dispensado / Não cumprido",
}

_NO_NOTICE = NoticeRule()
_FULL_INDEMNITY = NoticeRule("indemnity")
_HALF_INDEMNITY = NoticeRule("indemnity", fraction=0.5)  # Art. 484-A
_UNSERVED_DISCOUNT = NoticeRule("discount")

NOTICE_TABLE: Dict[Tuple[TerminationReason, NoticeType], NoticeRule] = {
    # --- SEM JUSTA CAUSA ---
    (TerminationReason.WITHOUT_CAUSE, NoticeType.WORKED): _NO_NOTICE,
    (TerminationReason.WITHOUT_CAUSE, NoticeType.INDEMNIFIED): _FULL_INDEMNITY,
    (TerminationReason.WITHOUT_CAUSE, NoticeType.WAIVED): _NO_NOTICE,
    # --- JUSTA CAUSA ---
    (TerminationReason.WITH_CAUSE, NoticeType.WORKED): _NO_NOTICE,
    (TerminationReason.WITH_CAUSE, NoticeType.INDEMNIFIED): _NO_NOTICE,
    (TerminationReason.WITH_CAUSE, NoticeType.WAIVED): _NO_NOTICE,
    # --- PEDIDO DE DEMISSÃO ---
    (TerminationReason.RESIGNATION, NoticeType.WORKED): _NO_NOTICE,
    (TerminationReason.RESIGNATION, NoticeType.INDEMNIFIED): _NO_NOTICE,
    (TerminationReason.RESIGNATION, NoticeType.WAIVED): _UNSERVED_DISCOUNT,
    # --- ACORDO ---
    (TerminationReason.AGREEMENT, NoticeType.WORKED): _NO_NOTICE,
    (TerminationReason.AGREEMENT, NoticeType.INDEMNIFIED): _HALF_INDEMNITY,
    (TerminationReason.AGREEMENT, NoticeType.WAIVED): _NO_NOTICE,
    # --- TÉRMINO DE CONTRATO ---
    (TerminationReason.END_OF_CONTRACT, NoticeType.WORKED): _NO_NOTICE,
    (TerminationReason.END_OF_CONTRACT, NoticeType.INDEMNIFIED): _NO_NOTICE,
    (TerminationReason.END_OF_CONTRACT, NoticeType.WAIVED): _NO_NOTICE,
}


def get_reason_rule(reason: TerminationReason) -> ReasonRule:
    return REASON_RULES[reason]


def get_notice_rule(reason: TerminationReason, notice_type: NoticeType) -> NoticeRule:
    return NOTICE_TABLE[(reason, notice_type)]


def missing_notice_cells() -> List[Tuple[TerminationReason, NoticeType]]:
    """Combinações motivo x aviso que ficaram de fora da tabela."""
    return [
        cell
        for cell in product(TerminationReason, NoticeType)
        if cell not in NOTICE_TABLE
    ]
