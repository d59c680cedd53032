# tests/domain/test_analise.py
#
# Validacao da entrada, resumo deterministico e AnaliseService com
# repositorio e modelo de linguagem em memoria.
import uuid
from decimal import Decimal

import pytest
from openai import OpenAIError

from tributomed.application.services.analise_service import AnaliseService, montar_perfil
from tributomed.domain.analise.entities import (
    MAX_ANEXO_BYTES,
    ArquivoAnexo,
    EntradaAnalise,
    RegistroAnalise,
    validar_entrada,
)
from tributomed.domain.analise.narrativa import DadosNarrativa, montar_prompt_narrativa, resumo_deterministico
from tributomed.domain.cliente.value_objects import TipoCliente
from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.motor import gerar_cenarios
from tributomed.domain.tributos.projecoes import ponto_de_equilibrio, projetar_faturamento


class RepoMemoria:
    def __init__(self) -> None:
        self.registros: dict[uuid.UUID, RegistroAnalise] = {}

    def salvar(self, registro: RegistroAnalise) -> None:
        self.registros[registro.id] = registro

    def buscar(self, id: uuid.UUID) -> RegistroAnalise | None:
        return self.registros.get(id)

    def listar_recentes(self, limit: int) -> list[RegistroAnalise]:
        return sorted(self.registros.values(), key=lambda r: r.criada_em, reverse=True)[:limit]


class LLMFixo:
    def __init__(self, texto: str = "", falha: bool = False) -> None:
        self.texto = texto
        self.falha = falha
        self.chamadas = 0

    def completar(self, sistema, usuario, temperatura=0.4, max_tokens=2000):
        self.chamadas += 1
        if self.falha:
            raise OpenAIError("modelo indisponivel")
        return self.texto

    def transcrever(self, nome, tipo, conteudo):
        return f"transcricao de {nome}"


def _entrada(**kwargs) -> EntradaAnalise:
    base = {
        "tipo_cliente": TipoCliente.NOVA_EMPRESA,
        "faturamento_mensal": Decimal("10000"),
        "empresa": "Clinica Exemplo",
        "dados_cliente": "Medica recem-formada, atendimento em consultorio proprio.",
    }
    base.update(kwargs)
    return EntradaAnalise(**base)


def _narrativa(faturamento: str = "10000") -> DadosNarrativa:
    perfil = PerfilTributario(faturamento_mensal=Decimal(faturamento))
    return DadosNarrativa(
        faturamento_mensal=perfil.faturamento_mensal,
        cenarios=tuple(gerar_cenarios(perfil)),
        projecoes=tuple(projetar_faturamento(perfil)),
        ponto_equilibrio=ponto_de_equilibrio(perfil),
        aliquota_iss=perfil.aliquota_iss,
    )


@pytest.mark.parametrize("faturamento", [None, Decimal("0"), Decimal("-10")])
def test_faturamento_obrigatorio(faturamento):
    with pytest.raises(ValueError, match="faturamento mensal"):
        validar_entrada(_entrada(faturamento_mensal=faturamento), [])


@pytest.mark.parametrize("aliquota", [Decimal("-1"), Decimal("5.01"), Decimal("10")])
def test_aliquota_iss_fora_da_faixa(aliquota):
    with pytest.raises(ValueError, match="Aliquota de ISS"):
        validar_entrada(_entrada(aliquota_iss=aliquota), [])


def test_aliquota_iss_nos_limites_aceita():
    validar_entrada(_entrada(aliquota_iss=Decimal("0")), [])
    validar_entrada(_entrada(aliquota_iss=Decimal("5")), [])


def test_sem_dados_nem_anexos():
    entrada = _entrada(dados_cliente="  ")
    with pytest.raises(ValueError, match="forneca as informacoes"):
        validar_entrada(entrada, [ArquivoAnexo("vazio.pdf", "application/pdf", b"")])


def test_anexo_basta_sem_dados_do_cliente():
    validar_entrada(_entrada(dados_cliente=""), [ArquivoAnexo("das.pdf", "application/pdf", b"%PDF")])


def test_anexo_grande_demais():
    anexo = ArquivoAnexo("extrato.pdf", "application/pdf", b"x" * (MAX_ANEXO_BYTES + 1))
    with pytest.raises(ValueError, match="ultrapassa o limite"):
        validar_entrada(_entrada(), [anexo])


def test_tipo_de_anexo_nao_suportado():
    with pytest.raises(ValueError, match="nao e suportado"):
        validar_entrada(_entrada(), [ArquivoAnexo("contrato.docx", "application/msword", b"abc")])


def test_texto_cliente_junta_transcricao():
    entrada = _entrada(dados_cliente="Dados", transcricao="Cliente quer abrir PJ")
    assert entrada.texto_cliente == "Dados\n\nTranscricao da negociacao:\nCliente quer abrir PJ"


def test_perfil_usa_iss_do_municipio_e_folha_do_fs12():
    perfil = montar_perfil(_entrada(municipio="Montes Claros", fs12=Decimal("36000")))
    assert perfil.aliquota_iss == Decimal("4")
    assert perfil.folha_mensal == Decimal("3000")


def test_perfil_respeita_iss_e_folha_informados():
    perfil = montar_perfil(
        _entrada(municipio="Montes Claros", aliquota_iss=Decimal("2"), folha_mensal=Decimal("500"), fs12=Decimal("1"))
    )
    assert perfil.aliquota_iss == Decimal("2")
    assert perfil.folha_mensal == Decimal("500")


def test_resumo_deterministico_tem_as_tres_secoes():
    resumo = resumo_deterministico(_narrativa())
    assert "**Recomendacao para o Cenario Atual:**" in resumo
    assert "**Analise das Projecoes:**" in resumo
    assert "**Pontos de Atencao:**" in resumo
    assert "Simples Nacional" in resumo


def test_prompt_narrativa_lista_cenarios_calculados():
    prompt = montar_prompt_narrativa(_narrativa())
    assert prompt.startswith("Faturamento mensal: R$ 10.000,00")
    assert "Cenarios (do mais barato ao mais caro):" in prompt
    assert "Ponto de equilibrio:" in prompt


def test_analise_sem_modelo_usa_resumo_deterministico():
    repo = RepoMemoria()
    analise = AnaliseService(repo).analisar(_entrada(), [])

    assert not analise.resumo_gerado_por_ia
    assert analise.resumo_executivo.startswith("**Recomendacao para o Cenario Atual:**")
    assert analise.melhor_cenario is not None
    assert analise.faturamento_mensal == "10000.00"
    assert analise.impacto_reforma.regime_atual == analise.melhor_cenario.nome
    assert len(repo.registros) == 1


def test_analise_com_modelo():
    llm = LLMFixo(texto="Resumo redigido pelo modelo")
    analise = AnaliseService(RepoMemoria(), llm=llm).analisar(_entrada(), [])
    assert analise.resumo_executivo == "Resumo redigido pelo modelo"
    assert analise.resumo_gerado_por_ia
    assert llm.chamadas == 1


@pytest.mark.parametrize("llm", [LLMFixo(falha=True), LLMFixo(texto="")])
def test_falha_do_modelo_nao_derruba_analise(llm):
    analise = AnaliseService(RepoMemoria(), llm=llm).analisar(_entrada(), [])
    assert not analise.resumo_gerado_por_ia
    assert "**Pontos de Atencao:**" in analise.resumo_executivo


def test_entrada_invalida_nao_persiste():
    repo = RepoMemoria()
    with pytest.raises(ValueError):
        AnaliseService(repo).analisar(_entrada(faturamento_mensal=None), [])
    assert repo.registros == {}


def test_obter_reconstroi_a_analise_persistida():
    repo = RepoMemoria()
    service = AnaliseService(repo)
    analise = service.analisar(_entrada(), [ArquivoAnexo("notas.txt", "text/plain", b"Receita de janeiro")])

    recuperada = service.obter(uuid.UUID(analise.id))
    assert recuperada == analise
    assert recuperada.texto_documentos == "Receita de janeiro"
    assert service.obter(uuid.uuid4()) is None

    resumos = service.listar(10)
    assert [r.id for r in resumos] == [analise.id]
