# tributomed/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from tributomed.infrastructure.config import get_settings
from tributomed.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from tributomed.infrastructure.duckdb_connection import get_connection

    logging.basicConfig(
        level=logging.DEBUG if get_settings().debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    get_connection()  # valida conexao e aplica o schema no startup
    yield


app = FastAPI(
    title="TributoMed API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

from tributomed.interfaces.api.routes.analise_routes import router as analise_router  # noqa: E402
from tributomed.interfaces.api.routes.cenario_routes import router as cenario_router  # noqa: E402
from tributomed.interfaces.api.routes.cnpj_routes import router as cnpj_router  # noqa: E402
from tributomed.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from tributomed.interfaces.api.routes.holding_routes import router as holding_router  # noqa: E402
from tributomed.interfaces.api.routes.noticia_routes import router as noticia_router  # noqa: E402
from tributomed.interfaces.api.routes.reforma_routes import router as reforma_router  # noqa: E402

app.include_router(cenario_router, prefix="/api")
app.include_router(cnpj_router, prefix="/api")
app.include_router(analise_router, prefix="/api")
app.include_router(export_router, prefix="/api")
app.include_router(reforma_router, prefix="/api")
app.include_router(noticia_router, prefix="/api")
app.include_router(holding_router, prefix="/api")
