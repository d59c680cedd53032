# tributomed/application/services/cnpj_service.py
from __future__ import annotations

from typing import Any

from tributomed.domain.cliente.value_objects import formatar_cnae, somente_digitos
from tributomed.domain.tributos.iss_municipal import consultar_iss
from tributomed.infrastructure.brasilapi_client import BrasilAPIClient

from ..dtos.cnpj_dto import EmpresaDTO

MAX_CNAES = 5


def _cnaes(dados: dict[str, Any]) -> list[str]:
    codigos = []
    if dados.get("cnae_fiscal"):
        codigos.append(formatar_cnae(dados["cnae_fiscal"]))
    for secundario in dados.get("cnaes_secundarios") or []:
        codigo = secundario.get("codigo")
        if codigo:
            codigos.append(formatar_cnae(codigo))
    return codigos[:MAX_CNAES]


def _endereco(dados: dict[str, Any]) -> str:
    rua = ", ".join(p for p in (dados.get("logradouro"), dados.get("numero")) if p)
    cidade = "/".join(p for p in (dados.get("municipio"), dados.get("uf")) if p)
    return " - ".join(p for p in (rua, cidade) if p)


class CNPJService:
    def __init__(self, client: BrasilAPIClient) -> None:
        self._client = client

    def consultar(self, cnpj: str) -> EmpresaDTO | None:
        """Dados da empresa e ISS do municipio sede.

        Raises:
            ValueError: CNPJ sem 14 digitos.
            LimiteBrasilAPIExcedido: BrasilAPI respondeu 429.
            httpx.HTTPError: falha na consulta.
        """
        digitos = somente_digitos(cnpj)
        if len(digitos) != 14:
            raise ValueError("CNPJ deve ter 14 digitos")

        dados = self._client.consultar_cnpj(digitos)
        if dados is None:
            return None

        razao_social = str(dados.get("razao_social") or "")
        nome_fantasia = dados.get("nome_fantasia") or None
        municipio = str(dados.get("municipio") or "")
        iss = consultar_iss(municipio)
        return EmpresaDTO(
            cnpj=digitos,
            nome=nome_fantasia or razao_social,
            razao_social=razao_social,
            nome_fantasia=nome_fantasia,
            cnaes=_cnaes(dados),
            endereco=_endereco(dados),
            municipio=municipio,
            uf=str(dados.get("uf") or ""),
            aliquota_iss=f"{iss.aliquota:.2f}",
            iss_fixo_mensal=f"{iss.iss_fixo_mensal:.2f}",
        )
