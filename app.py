# app.py (Tela Streamlit da Calculadora de Rescisão)
import streamlit as st
from datetime import date, timedelta
from pydantic import ValidationError

from rescisao.calculations import calculate_termination
from rescisao.explanation import generate_explanation
from rescisao.models import CalculationInputs, NoticeType, TerminationReason
from rescisao.report import breakdown_to_dataframe, build_breakdown
from rescisao.rules_catalog import NOTICE_LABELS, REASON_RULES
from rescisao.shared.utils import format_brl

st.set_page_config(page_title="Calculadora de Rescisão CLT", page_icon="📝", layout="wide")

# Faixa aceita pelos campos de data (o padrão do Streamlit é ±10 anos do valor inicial).
DATA_MINIMA = date(1950, 1, 1)
DATA_MAXIMA = date.today() + timedelta(days=365)


# Mesmas entradas -> mesmo resultado; o cache evita recalcular a cada interação.
@st.cache_data
def calcular(inputs: CalculationInputs):
    return calculate_termination(inputs)


def formatar_erros(erro: ValidationError) -> str:
    return " • ".join(e["msg"] for e in erro.errors())


st.title("📝 Calculadora de Rescisão CLT")
st.caption("Cálculos baseados na Lei 12.506/2011 e na Reforma Trabalhista.")

with st.sidebar:
    st.header("Dados do Contrato")
    salario = st.number_input("Salário Base (Bruto) R$", min_value=0.0, value=3500.00, step=100.00)
    data_admissao = st.date_input(
        "Data de Admissão",
        value=date(2022, 1, 1),
        min_value=DATA_MINIMA,
        max_value=DATA_MAXIMA,
        format="DD/MM/YYYY",
        key="data_admissao",
    )
    data_demissao = st.date_input(
        "Data de Demissão",
        value=date(2024, 5, 15),
        min_value=DATA_MINIMA,
        max_value=DATA_MAXIMA,
        format="DD/MM/YYYY",
        key="data_demissao",
    )
    motivo = st.selectbox(
        "Motivo do Desligamento",
        list(TerminationReason),
        format_func=lambda r: REASON_RULES[r].label,
    )
    aviso = st.selectbox(
        "Aviso Prévio",
        list(NoticeType),
        index=list(NoticeType).index(NoticeType.INDEMNIFIED),
        format_func=lambda n: NOTICE_LABELS[n],
    )
    saldo_fgts = st.number_input("Saldo do FGTS (p/ Multa) R$", min_value=0.0, value=8500.00)
    ferias_vencidas = st.checkbox("Possui férias vencidas?")

try:
    entradas = CalculationInputs(
        salary=salario,
        admission_date=data_admissao,
        resignation_date=data_demissao,
        reason=motivo,
        fgts_balance=saldo_fgts,
        has_overdue_vacations=ferias_vencidas,
        notice_type=aviso,
    )
except ValidationError as e:
    st.error(formatar_erros(e))
    st.stop()

resultado = calcular(entradas)
detalhes = resultado.details

col1, col2, col3, col4 = st.columns(4)
col1.metric("Total Bruto", format_brl(resultado.total_gross))
col2.metric("Total Líquido", format_brl(resultado.total_net))
col3.metric("Tempo de Casa", f"{detalhes.years} anos")
col4.metric("Aviso Prévio", f"{detalhes.notice_days} dias")
st.caption(f"Data projetada do término: {detalhes.projected_date:%d/%m/%Y}")

st.divider()
st.subheader("Demonstrativo")
st.dataframe(breakdown_to_dataframe(build_breakdown(resultado)), width="stretch", hide_index=True)

st.divider()
st.subheader("🤖 Explicação")
if st.button("Gerar explicação"):
    with st.spinner("Consultando o especialista virtual..."):
        st.session_state["explicacao"] = (entradas, generate_explanation(resultado, entradas))
# Explicação antiga só aparece se os dados do contrato não mudaram.
if "explicacao" in st.session_state and st.session_state["explicacao"][0] == entradas:
    st.markdown(st.session_state["explicacao"][1])

st.info(
    "⚠️ Nota: Este cálculo é uma estimativa e não substitui o cálculo oficial do RH/Contabilidade. "
    "INSS/IRRF sobre verbas rescisórias não estão incluídos."
)
