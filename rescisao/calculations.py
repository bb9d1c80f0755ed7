# rescisao/calculations.py

"""
Motor de cálculo das verbas rescisórias (CLT).

Fluxo: tempo de casa -> dias de aviso -> projeção do aviso indenizado ->
13º e férias proporcionais -> montagem dos totais.
Todas as funções são puras: mesma entrada, mesmo resultado.
"""

import calendar
import math
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from .logging_config import log
from .models import (
    CalculationInputs,
    CalculationResults,
    NoticeType,
    TerminationDetails,
    TerminationReason,
)
from .rules_catalog import POLICY, get_notice_rule, get_reason_rule


# --- Funções Auxiliares ---


def get_total_dias_mes(ano: int, mes: int) -> int:
    return calendar.monthrange(ano, mes)[1]


# --- Tempo de Casa e Aviso ---


def calc_full_years(admission: date, resignation: date) -> int:
    # Ano de 365,25 dias: aproximação adotada, não corrige anos bissextos exatos.
    return math.floor((resignation - admission).days / POLICY.days_per_year)


def calc_notice_days(full_years: int) -> int:
    """Lei 12.506/11: 30 dias + 3 por ano completo, no máximo 90 no total."""
    notice_days = POLICY.base_notice_days
    if full_years >= 1:
        notice_days += min(
            POLICY.max_extra_notice_days, full_years * POLICY.notice_days_per_year
        )
    return notice_days


def project_termination_date(
    resignation: date, notice_days: int, is_indemnified: bool
) -> date:
    # O aviso indenizado projeta o fim do contrato em dias corridos.
    if is_indemnified:
        return resignation + timedelta(days=notice_days)
    return resignation


# --- Proporcionais ---


def count_thirteenth_months(admission: date, projected: date) -> int:
    """
    Meses de 13º no ano civil da data projetada, pela regra dos 15 dias.

    O mês inicial conta do dia de início até o fim do mês, mesmo quando a
    data projetada cai nele. O mês da data projetada conta até o dia
    projetado. Os demais contam o mês inteiro.
    """
    inicio_ano = date(projected.year, 1, 1)
    inicio = admission if admission > inicio_ano else inicio_ano

    meses = 0
    atual = inicio
    while atual <= projected:
        fim_mes = date(atual.year, atual.month, get_total_dias_mes(atual.year, atual.month))

        if atual.month == inicio.month:
            dias_efetivos = fim_mes.day - atual.day + 1
        elif atual.month == projected.month:
            dias_efetivos = projected.day
        else:
            dias_efetivos = fim_mes.day

        if dias_efetivos >= POLICY.min_days_for_month:
            meses += 1
        atual = fim_mes + timedelta(days=1)

    return meses


def last_anniversary(admission: date, projected: date) -> date:
    """Último aniversário de admissão em ou antes da data projetada (29/02 vira 28/02)."""
    aniversario = admission + relativedelta(years=projected.year - admission.year)
    if aniversario > projected:
        aniversario = admission + relativedelta(years=projected.year - 1 - admission.year)
    return aniversario


def count_vacation_months(admission: date, projected: date) -> int:
    """
    Meses do período aquisitivo em curso, em janelas de um mês contadas a
    partir do último aniversário de admissão. Janela com 15+ dias conta.
    """
    aniversario = last_anniversary(admission, projected)

    meses = 0
    k = 0
    inicio_janela = aniversario
    while inicio_janela <= projected:
        fim_janela = aniversario + relativedelta(months=k + 1)
        dias_periodo = (min(projected, fim_janela) - inicio_janela).days

        if dias_periodo >= POLICY.min_days_for_month:
            meses += 1
        k += 1
        inicio_janela = fim_janela

    return meses


def calc_proportional(salary: float, meses: int) -> float:
    """Avos do salário (1/12 por mês), limitados a 12/12."""
    return (salary / POLICY.months_per_year) * min(POLICY.months_per_year, meses)


# --- Verbas Fixas ---


def calc_salary_balance(salary: float, resignation: date) -> float:
    # Mês comercial de 30 dias, pelos dias trabalhados no mês da saída.
    return (salary / POLICY.commercial_month_days) * resignation.day


def calc_overdue_vacations(salary: float, has_overdue_vacations: bool) -> float:
    if not has_overdue_vacations:
        return 0.0
    return salary + (salary / POLICY.vacation_bonus_divisor)


def calc_notice_value(
    salary: float, notice_days: int, reason: TerminationReason, notice_type: NoticeType
) -> float:
    """Valor do aviso: positivo se indenizado, negativo se desconto."""
    regra = get_notice_rule(reason, notice_type)
    if regra.kind == "indemnity":
        return ((salary / POLICY.commercial_month_days) * notice_days) * regra.fraction
    if regra.kind == "discount":
        return -salary * regra.fraction
    return 0.0


def calc_fgts_penalty(fgts_balance: float, reason: TerminationReason) -> float:
    return fgts_balance * get_reason_rule(reason).fgts_penalty_pct


# --- Motor Principal ---


def calculate_termination(inputs: CalculationInputs) -> CalculationResults:
    salary = inputs.salary
    admission = inputs.admission_date
    resignation = inputs.resignation_date
    is_indemnified = inputs.notice_type == NoticeType.INDEMNIFIED

    full_years = calc_full_years(admission, resignation)
    notice_days = calc_notice_days(full_years)
    projected = project_termination_date(resignation, notice_days, is_indemnified)
    log.debug(
        f"Tempo de casa: {full_years} anos | Aviso: {notice_days} dias | Projeção: {projected:%d/%m/%Y}"
    )

    salary_balance = calc_salary_balance(salary, resignation)

    thirteenth = 0.0
    vacations = 0.0
    vacations_one_third = 0.0
    if not get_reason_rule(inputs.reason).forfeits_proportionals:
        thirteenth = calc_proportional(salary, count_thirteenth_months(admission, projected))
        vacations = calc_proportional(salary, count_vacation_months(admission, projected))
        vacations_one_third = vacations / POLICY.vacation_bonus_divisor

    vacations_overdue = calc_overdue_vacations(salary, inputs.has_overdue_vacations)
    notice_value = calc_notice_value(salary, notice_days, inputs.reason, inputs.notice_type)
    fgts_penalty = calc_fgts_penalty(inputs.fgts_balance, inputs.reason)

    total_gross = (
        salary_balance
        + thirteenth
        + vacations
        + vacations_one_third
        + vacations_overdue
        + (notice_value if notice_value > 0 else 0.0)
        + fgts_penalty
    )
    # Desconto de aviso só entra no líquido.
    total_net = total_gross + (notice_value if notice_value < 0 else 0.0)

    return CalculationResults(
        salary_balance=salary_balance,
        thirteenth_proportional=thirteenth,
        vacations_proportional=vacations,
        vacations_one_third=vacations_one_third,
        vacations_overdue=vacations_overdue,
        notice_indemnified=notice_value,
        fgts_penalty=fgts_penalty,
        fgts_total_balance=inputs.fgts_balance,
        total_gross=total_gross,
        total_net=total_net,
        details=TerminationDetails(
            years=full_years,
            notice_days=notice_days,
            projected_date=projected,
        ),
    )
