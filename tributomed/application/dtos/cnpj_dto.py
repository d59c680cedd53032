# tributomed/application/dtos/cnpj_dto.py
from __future__ import annotations

from pydantic import BaseModel


class EmpresaDTO(BaseModel):
    cnpj: str
    nome: str
    razao_social: str
    nome_fantasia: str | None
    cnaes: list[str]
    endereco: str
    municipio: str
    uf: str
    aliquota_iss: str
    iss_fixo_mensal: str
