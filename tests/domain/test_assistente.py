# tests/domain/test_assistente.py
from decimal import Decimal

import pytest

from tributomed.domain.reforma.assistente import (
    MENSAGEM_ERRO,
    ContextoCliente,
    MensagemChat,
    NivelComplexidade,
    PapelMensagem,
    PerguntaAssistente,
    avaliar_complexidade,
    extrair_referencias_legais,
    extrair_topicos_relacionados,
    montar_prompt_sistema,
    montar_prompt_usuario,
    processar_resposta,
    resposta_de_erro,
)


def test_pergunta_vazia_rejeitada():
    with pytest.raises(ValueError):
        PerguntaAssistente("   ")


def test_prompt_sistema_inclui_base_de_conhecimento():
    prompt = montar_prompt_sistema()
    assert "CRONOGRAMA DA REFORMA TRIBUTARIA" in prompt
    assert "CESTA BASICA NACIONAL" in prompt
    assert "Lei Complementar 214/2025" in prompt


def test_prompt_usuario_limita_historico():
    historico = tuple(MensagemChat(PapelMensagem.USUARIO, f"mensagem {i}") for i in range(7))
    prompt = montar_prompt_usuario(PerguntaAssistente("E o cashback?", historico))
    assert "mensagem 0" not in prompt
    assert "mensagem 1" not in prompt
    assert "mensagem 2" in prompt
    assert "mensagem 6" in prompt
    assert prompt.endswith("## PERGUNTA ATUAL\nE o cashback?")


def test_prompt_usuario_com_contexto():
    contexto = ContextoCliente(regime_atual="Simples Nacional", faturamento_anual=Decimal("1200000"), setor="Saude")
    prompt = montar_prompt_usuario(PerguntaAssistente("Vou pagar mais?", contexto=contexto))
    assert "Regime Tributario Atual: Simples Nacional" in prompt
    assert "R$ 1.200.000,00" in prompt
    assert "Setor: Saude" in prompt


def test_referencias_legais_sem_duplicatas_na_ordem():
    texto = "Segundo a LC 214/2025 e a EC 132/2023. Reforco: LC 214/2025."
    assert extrair_referencias_legais(texto) == ("LC 214/2025", "EC 132/2023")


def test_topicos_relacionados_limitados_a_cinco():
    topicos = extrair_topicos_relacionados("", "Como ficam CBS e IBS?")
    assert len(topicos) == 5
    assert topicos[0] == "IBS - Imposto sobre Bens e Servicos"


def test_topicos_sem_palavra_chave():
    assert extrair_topicos_relacionados("Resposta generica", "Ola") == ()


def test_complexidade_por_termos_tecnicos():
    assert avaliar_complexidade("Resposta simples") is NivelComplexidade.BASICO
    assert avaliar_complexidade("Creditamento e split payment") is NivelComplexidade.INTERMEDIARIO
    texto = "Creditamento, split payment, nao cumulatividade e o comite gestor"
    assert avaliar_complexidade(texto) is NivelComplexidade.AVANCADO


def test_processar_resposta():
    resposta = processar_resposta("A CBS (LC 214/2025) usa creditamento.", "O que e CBS?")
    assert resposta.sucesso
    assert resposta.referencias_legais == ("LC 214/2025",)
    assert "Split Payment" in resposta.topicos_relacionados
    assert resposta.erro is None


def test_resposta_de_erro():
    resposta = resposta_de_erro("timeout")
    assert not resposta.sucesso
    assert resposta.mensagem == MENSAGEM_ERRO
    assert resposta.erro == "timeout"
