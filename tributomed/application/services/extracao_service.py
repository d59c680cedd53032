# tributomed/application/services/extracao_service.py
#
# Texto dos anexos da analise.
#
# Design decisions:
#   - CSV e XLSX sao lidos localmente com polars (XLSX via fastexcel, todas as
#     abas) e reescritos como CSV; texto puro e decodificado (UTF-8, com
#     fallback latin-1).
#   - PDF e imagens dependem do modelo de linguagem. Sem modelo configurado o
#     anexo entra como marcador, sem texto.
#   - Falha ao extrair um anexo nunca derruba a analise: o texto vira
#     "[Erro ao processar o arquivo: nome]".
from __future__ import annotations

import io
import logging

import polars as pl

from tributomed.domain.analise.entities import TIPOS_IMAGEM, AnexoProcessado, ArquivoAnexo
from tributomed.infrastructure.llm_client import ModeloLinguagem

logger = logging.getLogger(__name__)

TIPO_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SEPARADOR_DOCUMENTOS = "\n\n---\n\n"


def _decodificar(conteudo: bytes) -> str:
    try:
        return conteudo.decode("utf-8-sig")
    except UnicodeDecodeError:
        return conteudo.decode("latin-1")


def _separador_csv(texto: str) -> str:
    primeira = texto.split("\n", 1)[0]
    return ";" if primeira.count(";") > primeira.count(",") else ","


def csv_para_texto(conteudo: bytes) -> str:
    texto = _decodificar(conteudo)
    df = pl.read_csv(io.StringIO(texto), separator=_separador_csv(texto), infer_schema=False)
    return df.write_csv()


def xlsx_para_texto(conteudo: bytes) -> str:
    abas = pl.read_excel(io.BytesIO(conteudo), sheet_id=0)
    return "\n\n".join(f"# {nome}\n{df.write_csv()}" for nome, df in abas.items())


def _tipo_efetivo(anexo: ArquivoAnexo) -> str:
    if anexo.tipo:
        return anexo.tipo
    nome = anexo.nome.lower()
    if nome.endswith(".csv"):
        return "text/csv"
    if nome.endswith(".xlsx"):
        return TIPO_XLSX
    if nome.endswith(".pdf"):
        return "application/pdf"
    return "application/octet-stream"


class ExtracaoService:
    def __init__(self, llm: ModeloLinguagem | None = None) -> None:
        self._llm = llm

    def extrair(self, anexo: ArquivoAnexo) -> AnexoProcessado:
        tipo = _tipo_efetivo(anexo)
        try:
            texto = self._texto(anexo, tipo)
        except Exception:  # noqa: BLE001
            logger.exception("Falha ao extrair texto de %s", anexo.nome)
            texto = f"[Erro ao processar o arquivo: {anexo.nome}]"
        return AnexoProcessado(nome=anexo.nome, tipo=tipo, tamanho=anexo.tamanho, texto_extraido=texto)

    def extrair_todos(self, anexos: list[ArquivoAnexo]) -> list[AnexoProcessado]:
        return [self.extrair(a) for a in anexos if a.tamanho > 0]

    def _texto(self, anexo: ArquivoAnexo, tipo: str) -> str:
        if tipo == "text/csv":
            return csv_para_texto(anexo.conteudo)
        if tipo == TIPO_XLSX:
            return xlsx_para_texto(anexo.conteudo)
        if tipo == "text/plain":
            return _decodificar(anexo.conteudo)
        if tipo == "application/pdf" or tipo in TIPOS_IMAGEM:
            if self._llm is None:
                logger.warning("Sem modelo configurado para transcrever %s", anexo.nome)
                return f"[Arquivo {anexo.nome}: transcricao indisponivel sem modelo configurado]"
            return self._llm.transcrever(anexo.nome, tipo, anexo.conteudo)
        raise ValueError(f"Tipo de arquivo nao suportado: {tipo}")


def juntar_textos(anexos: list[AnexoProcessado]) -> str:
    return SEPARADOR_DOCUMENTOS.join(a.texto_extraido for a in anexos if a.texto_extraido.strip())
