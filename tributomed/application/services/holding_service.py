# tributomed/application/services/holding_service.py
from __future__ import annotations

from tributomed.domain.holding.diagnostico import diagnosticar
from tributomed.domain.holding.documentos import gerar_lista_integralizacao, gerar_protocolo_familiar
from tributomed.domain.holding.entities import DiagnosticoHolding

from ..dtos.holding_dto import DocumentosHoldingDTO, ResultadoDiagnosticoDTO


class HoldingService:
    def diagnosticar(self, diagnostico: DiagnosticoHolding) -> ResultadoDiagnosticoDTO:
        return ResultadoDiagnosticoDTO.from_domain(diagnosticar(diagnostico))

    def documentos(self, diagnostico: DiagnosticoHolding) -> DocumentosHoldingDTO:
        return DocumentosHoldingDTO(
            protocolo_familiar=gerar_protocolo_familiar(diagnostico),
            lista_integralizacao=gerar_lista_integralizacao(diagnostico),
        )
