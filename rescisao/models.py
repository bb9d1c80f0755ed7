# rescisao/models.py
# Moldes de entrada e saída do cálculo. O pydantic valida os dados na
# fronteira (API, tela) antes de o motor de cálculo ser chamado.

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# Última data de demissão aceita (a projeção e as janelas de férias passam dela).
DATA_LIMITE = date(2100, 12, 31)


class TerminationReason(str, Enum):
    WITHOUT_CAUSE = "WITHOUT_CAUSE"
    WITH_CAUSE = "WITH_CAUSE"
    RESIGNATION = "RESIGNATION"
    AGREEMENT = "AGREEMENT"
    END_OF_CONTRACT = "END_OF_CONTRACT"


class NoticeType(str, Enum):
    WORKED = "WORKED"
    INDEMNIFIED = "INDEMNIFIED"
    WAIVED = "WAIVED"


class _FrozenModel(BaseModel):
    # JSON em camelCase (admissionDate, noticeIndemnified...), Python em snake_case.
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CalculationInputs(_FrozenModel):
    salary: float = Field(..., ge=0, allow_inf_nan=False)
    admission_date: date
    resignation_date: date
    reason: TerminationReason
    fgts_balance: float = Field(0.0, ge=0, allow_inf_nan=False)
    has_overdue_vacations: bool = False
    notice_type: NoticeType

    @field_validator("fgts_balance", mode="before")
    @classmethod
    def empty_fgts_to_zero(cls, v):
        """Saldo de FGTS não informado no formulário vira 0."""
        if v is None or v == "":
            return 0.0
        return v

    @model_validator(mode="after")
    def check_dates(self):
        if self.resignation_date > DATA_LIMITE:
            raise ValueError(
                f"Data de demissão ({self.resignation_date:%d/%m/%Y}) posterior ao limite "
                f"de {DATA_LIMITE:%d/%m/%Y}."
            )
        if self.resignation_date < self.admission_date:
            raise ValueError(
                f"Data de demissão ({self.resignation_date:%d/%m/%Y}) anterior à "
                f"admissão ({self.admission_date:%d/%m/%Y})."
            )
        return self


class TerminationDetails(_FrozenModel):
    years: int
    notice_days: int
    projected_date: date


class CalculationResults(_FrozenModel):
    salary_balance: float
    thirteenth_proportional: float
    vacations_proportional: float
    vacations_one_third: float
    vacations_overdue: float
    # Negativo quando é desconto (pedido de demissão sem cumprir aviso).
    notice_indemnified: float
    fgts_penalty: float
    fgts_total_balance: float
    total_gross: float
    total_net: float
    details: TerminationDetails


class BreakdownItem(_FrozenModel):
    label: str
    value: float
    kind: str  # "provento", "desconto" ou "informativo"
