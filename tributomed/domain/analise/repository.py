# tributomed/domain/analise/repository.py
from __future__ import annotations

import uuid
from typing import Protocol

from .entities import RegistroAnalise


class AnaliseRepository(Protocol):
    def salvar(self, registro: RegistroAnalise) -> None: ...
    def buscar(self, id: uuid.UUID) -> RegistroAnalise | None: ...
    def listar_recentes(self, limit: int) -> list[RegistroAnalise]: ...
