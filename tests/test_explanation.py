# tests/test_explanation.py

import pytest
import requests

from rescisao import explanation
from rescisao.calculations import calculate_termination
from rescisao.config import Settings
from rescisao.explanation import PLACEHOLDER_EXPLANATION, build_prompt, generate_explanation
from rescisao.logging_config import log


class RespostaFalsa:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


@pytest.fixture
def cenario(criar_inputs):
    inputs = criar_inputs()
    return calculate_termination(inputs), inputs


@pytest.fixture
def config_com_chave():
    return Settings(GEMINI_API_KEY="chave-teste", GEMINI_MODEL="gemini-teste")


def test_prompt_contem_dados_do_calculo(cenario):
    resultado, inputs = cenario
    prompt = build_prompt(resultado, inputs)

    assert "Demissão sem Justa Causa" in prompt
    assert "R$ 3.500,00" in prompt
    assert "01/01/2022" in prompt
    assert "Aviso Prévio: 36 dias" in prompt
    assert "Multa FGTS: R$ 3.400,00" in prompt


def test_sem_chave_retorna_texto_padrao(cenario, monkeypatch):
    def nao_deve_chamar(*args, **kwargs):
        raise AssertionError("requisição não esperada")

    monkeypatch.setattr(explanation.requests, "post", nao_deve_chamar)
    resultado, inputs = cenario
    assert generate_explanation(resultado, inputs, Settings(GEMINI_API_KEY=None)) == PLACEHOLDER_EXPLANATION


def test_resposta_valida(cenario, config_com_chave, monkeypatch):
    chamadas = {}

    def post_falso(url, headers=None, json=None, timeout=None):
        chamadas.update(url=url, headers=headers, json=json, timeout=timeout)
        return RespostaFalsa(
            {"candidates": [{"content": {"parts": [{"text": "Você tem direito a..."}]}}]}
        )

    monkeypatch.setattr(explanation.requests, "post", post_falso)
    resultado, inputs = cenario

    texto = generate_explanation(resultado, inputs, config_com_chave)

    assert texto == "Você tem direito a..."
    assert chamadas["url"].endswith("/gemini-teste:generateContent")
    assert chamadas["headers"] == {"x-goog-api-key": "chave-teste"}
    assert "chave-teste" not in chamadas["url"]
    assert chamadas["timeout"] == config_com_chave.EXPLANATION_TIMEOUT
    assert "Lei 12.506" in chamadas["json"]["contents"][0]["parts"][0]["text"]


def test_erro_http_vira_texto_padrao(cenario, config_com_chave, monkeypatch):
    monkeypatch.setattr(
        explanation.requests, "post", lambda *a, **k: RespostaFalsa({}, status_code=503)
    )
    resultado, inputs = cenario
    assert generate_explanation(resultado, inputs, config_com_chave) == PLACEHOLDER_EXPLANATION


def test_timeout_vira_texto_padrao(cenario, config_com_chave, monkeypatch):
    def post_lento(*args, **kwargs):
        raise requests.exceptions.Timeout("tempo esgotado")

    monkeypatch.setattr(explanation.requests, "post", post_lento)
    resultado, inputs = cenario
    assert generate_explanation(resultado, inputs, config_com_chave) == PLACEHOLDER_EXPLANATION


@pytest.mark.parametrize(
    "payload",
    [{}, {"candidates": []}, {"candidates": [{"content": {"parts": [{"text": "  "}]}}]}],
)
def test_resposta_malformada_vira_texto_padrao(cenario, config_com_chave, monkeypatch, payload):
    monkeypatch.setattr(explanation.requests, "post", lambda *a, **k: RespostaFalsa(payload))
    resultado, inputs = cenario
    assert generate_explanation(resultado, inputs, config_com_chave) == PLACEHOLDER_EXPLANATION


def test_chave_nao_aparece_no_log_de_erro(cenario, config_com_chave, monkeypatch):
    # Resposta 401 real do requests, montada a partir da requisição enviada
    def post_nao_autorizado(url, headers=None, json=None, timeout=None):
        requisicao = requests.Request("POST", url, headers=headers, json=json).prepare()
        resposta = requests.Response()
        resposta.status_code = 401
        resposta.reason = "Unauthorized"
        resposta.url = requisicao.url
        resposta.request = requisicao
        return resposta

    monkeypatch.setattr(explanation.requests, "post", post_nao_autorizado)
    mensagens = []
    handler_id = log.add(mensagens.append, level="DEBUG", format="{message}")
    resultado, inputs = cenario
    try:
        texto = generate_explanation(resultado, inputs, config_com_chave)
    finally:
        log.remove(handler_id)

    saida = "".join(mensagens)
    assert texto == PLACEHOLDER_EXPLANATION
    assert "401 Client Error" in saida
    assert "chave-teste" not in saida
