# tests/conftest.py

from datetime import date

import pytest

from rescisao.models import CalculationInputs, NoticeType, TerminationReason


# Helper para criar entradas de teste a partir do cenário padrão
@pytest.fixture
def criar_inputs():
    def _criar(**dados) -> CalculationInputs:
        padrao = {
            "salary": 3500.0,
            "admission_date": date(2022, 1, 1),
            "resignation_date": date(2024, 5, 15),
            "reason": TerminationReason.WITHOUT_CAUSE,
            "fgts_balance": 8500.0,
            "has_overdue_vacations": False,
            "notice_type": NoticeType.INDEMNIFIED,
        }
        padrao.update(dados)
        return CalculationInputs(**padrao)

    return _criar
