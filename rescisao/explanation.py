# rescisao/explanation.py

"""
Explicação em linguagem natural do cálculo, gerada pelo Gemini.

Falha aqui nunca derruba o cálculo: qualquer erro vira a mensagem padrão.
"""

from typing import Optional

import requests

from .config import Settings, get_settings
from .logging_config import log
from .models import CalculationInputs, CalculationResults
from .rules_catalog import get_reason_rule
from .shared.utils import format_brl

PLACEHOLDER_EXPLANATION = (
    "Não foi possível gerar a explicação via IA no momento. "
    "Por favor, revise os valores manualmente."
)


def build_prompt(result: CalculationResults, inputs: CalculationInputs) -> str:
    ferias_total = result.vacations_proportional + result.vacations_one_third
    return f"""
Você é um especialista em Departamento Pessoal e Direito do Trabalho no Brasil.
Analise o seguinte cálculo de rescisão:

- Motivo: {get_reason_rule(inputs.reason).label}
- Salário Base: {format_brl(inputs.salary)}
- Data Admissão: {inputs.admission_date:%d/%m/%Y}
- Data Demissão: {inputs.resignation_date:%d/%m/%Y}
- Tempo de Casa: {result.details.years} anos
- Aviso Prévio: {result.details.notice_days} dias

Resultados calculados:
- Saldo de Salário: {format_brl(result.salary_balance)}
- 13º Proporcional: {format_brl(result.thirteenth_proportional)}
- Férias Proporcionais + 1/3: {format_brl(ferias_total)}
- Férias Vencidas + 1/3: {format_brl(result.vacations_overdue)}
- Aviso Prévio Indenizado: {format_brl(result.notice_indemnified)}
- Multa FGTS: {format_brl(result.fgts_penalty)}
- TOTAL LÍQUIDO: {format_brl(result.total_net)}

Explique brevemente ao colaborador seus direitos neste cenário específico, validando se o aviso prévio proporcional (Lei 12.506) foi aplicado corretamente e dando dicas sobre o saque do FGTS e Seguro Desemprego se aplicável. Mantenha um tom profissional e acolhedor. Responda em Português.
""".strip()


def _extract_text(payload: dict) -> str:
    partes = payload["candidates"][0]["content"]["parts"]
    texto = "".join(p.get("text", "") for p in partes).strip()
    if not texto:
        raise ValueError("resposta sem texto")
    return texto


def generate_explanation(
    result: CalculationResults,
    inputs: CalculationInputs,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()

    if not settings.GEMINI_API_KEY:
        log.warning("GEMINI_API_KEY não configurada; usando explicação padrão.")
        return PLACEHOLDER_EXPLANATION

    # A chave nunca vai na URL.
    api_url = f"{settings.GEMINI_API_URL}/{settings.GEMINI_MODEL}:generateContent"
    body = {"contents": [{"parts": [{"text": build_prompt(result, inputs)}]}]}

    try:
        log.info(f"Solicitando explicação ao modelo {settings.GEMINI_MODEL}...")
        response = requests.post(
            api_url,
            headers={"x-goog-api-key": settings.GEMINI_API_KEY},
            json=body,
            timeout=settings.EXPLANATION_TIMEOUT,
        )
        response.raise_for_status()  # Lança erro para status 4xx ou 5xx
        return _extract_text(response.json())
    except requests.exceptions.RequestException as e:
        log.error(f"Erro na requisição ao Gemini: {e}")
    except (KeyError, IndexError, TypeError, ValueError) as e:
        log.error(f"Resposta inesperada do Gemini: {e}")

    return PLACEHOLDER_EXPLANATION
