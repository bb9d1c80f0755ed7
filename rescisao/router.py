# rescisao/router.py

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Dict, List

from .calculations import calculate_termination
from .explanation import generate_explanation
from .logging_config import log
from .models import (
    BreakdownItem,
    CalculationInputs,
    CalculationResults,
    TerminationReason,
)
from .report import build_breakdown
from .rules_catalog import NOTICE_LABELS, REASON_RULES

router = APIRouter(prefix="/api/v1/rescisao", tags=["Rescisão - Cálculo"])

# --- MODELOS ---


class BreakdownResponse(BaseModel):
    resultado: CalculationResults
    verbas: List[BreakdownItem]


class ExplanationResponse(BaseModel):
    resultado: CalculationResults
    explicacao: str


# --- ENDPOINTS ---


@router.get("/catalog/motivos")
async def get_reason_catalog() -> Dict[str, str]:
    return {reason.value: rule.label for reason, rule in REASON_RULES.items()}


@router.get("/catalog/motivos/{reason}")
async def get_reason_rule_detail(reason: str):
    try:
        rule = REASON_RULES[TerminationReason(reason.upper())]
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Motivo '{reason}' não encontrado no catálogo.",
        )
    return {
        "motivo": reason.upper(),
        "label": rule.label,
        "perdeProporcionais": rule.forfeits_proportionals,
        "multaFgts": rule.fgts_penalty_pct,
    }


@router.get("/catalog/avisos")
async def get_notice_catalog() -> Dict[str, str]:
    return {notice.value: label for notice, label in NOTICE_LABELS.items()}


@router.post("/calcular", response_model=CalculationResults)
async def calculate(request: CalculationInputs):
    log.info(
        f"[Router] Cálculo: {request.reason.value} / {request.notice_type.value} "
        f"({request.admission_date} a {request.resignation_date})"
    )
    return calculate_termination(request)


@router.post("/detalhamento", response_model=BreakdownResponse)
async def calculate_with_breakdown(request: CalculationInputs):
    resultado = calculate_termination(request)
    return BreakdownResponse(resultado=resultado, verbas=build_breakdown(resultado))


# Função síncrona: o FastAPI roda em threadpool e a chamada HTTP ao Gemini não bloqueia o loop.
@router.post("/explicacao", response_model=ExplanationResponse)
def calculate_with_explanation(request: CalculationInputs):
    resultado = calculate_termination(request)
    explicacao = generate_explanation(resultado, request)
    return ExplanationResponse(resultado=resultado, explicacao=explicacao)
