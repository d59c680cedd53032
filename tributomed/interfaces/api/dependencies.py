# tributomed/interfaces/api/dependencies.py
from fastapi import Depends

from tributomed.application.services.analise_service import AnaliseService
from tributomed.application.services.cenario_service import CenarioService
from tributomed.application.services.cnpj_service import CNPJService
from tributomed.application.services.export_service import ExportService
from tributomed.application.services.holding_service import HoldingService
from tributomed.application.services.noticia_service import NoticiaService
from tributomed.application.services.reforma_service import ReformaService
from tributomed.infrastructure.brasilapi_client import BrasilAPIClient
from tributomed.infrastructure.config import get_settings
from tributomed.infrastructure.duckdb_connection import get_connection
from tributomed.infrastructure.llm_client import ModeloLinguagem, OpenAILLMClient
from tributomed.infrastructure.repositories.duckdb_analise_repo import DuckDBAnaliseRepo
from tributomed.infrastructure.repositories.duckdb_noticia_repo import DuckDBNoticiaRepo
from tributomed.infrastructure.webhook_client import WebhookClient


def get_llm() -> ModeloLinguagem | None:
    settings = get_settings()
    if not settings.llm_habilitado:
        return None
    return OpenAILLMClient(api_key=settings.openai_api_key, model=settings.openai_model)


def get_webhook() -> WebhookClient | None:
    settings = get_settings()
    if not settings.analysis_webhook_url:
        return None
    return WebhookClient(settings.analysis_webhook_url, timeout=settings.http_timeout_seconds)


def get_brasilapi_client() -> BrasilAPIClient:
    settings = get_settings()
    return BrasilAPIClient(settings.brasilapi_url, timeout=settings.http_timeout_seconds)


def get_cenario_service() -> CenarioService:
    return CenarioService()


def get_analise_service(
    llm: ModeloLinguagem | None = Depends(get_llm),  # noqa: B008
    webhook: WebhookClient | None = Depends(get_webhook),  # noqa: B008
) -> AnaliseService:
    return AnaliseService(repo=DuckDBAnaliseRepo(get_connection()), llm=llm, webhook=webhook)


def get_reforma_service(llm: ModeloLinguagem | None = Depends(get_llm)) -> ReformaService:  # noqa: B008
    return ReformaService(llm=llm)


def get_noticia_service() -> NoticiaService:
    return NoticiaService(
        repo=DuckDBNoticiaRepo(get_connection()),
        timeout=get_settings().http_timeout_seconds,
    )


def get_cnpj_service(client: BrasilAPIClient = Depends(get_brasilapi_client)) -> CNPJService:  # noqa: B008
    return CNPJService(client)


def get_holding_service() -> HoldingService:
    return HoldingService()


def get_export_service() -> ExportService:
    return ExportService()
