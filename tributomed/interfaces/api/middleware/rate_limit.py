# tributomed/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from tributomed.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP. X-API-Key ignora o limite.

    So IPs com requisicoes dentro da janela ficam em memoria.
    """

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requisicoes: dict[str, list[float]] = {}

    def _podar(self, agora: float) -> None:
        expirados = [
            ip for ip, tempos in self._requisicoes.items()
            if not tempos or agora - tempos[-1] >= JANELA_SEGUNDOS
        ]
        for ip in expirados:
            del self._requisicoes[ip]

    def registrar(self, ip: str, limite: int, agora: float) -> bool:
        """Conta a requisicao de `ip`; False quando o limite da janela foi atingido."""
        self._podar(agora)
        recentes = [t for t in self._requisicoes.get(ip, []) if agora - t < JANELA_SEGUNDOS]
        if len(recentes) >= limite:
            self._requisicoes[ip] = recentes
            return False
        recentes.append(agora)
        self._requisicoes[ip] = recentes
        return True

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (testes)
        if limite == 0 or request.headers.get("X-API-Key"):
            return await call_next(request)

        ip = request.client.host if request.client else "unknown"
        if not self.registrar(ip, limite, time.time()):
            return Response(
                content='{"detail": "Muitas requisicoes. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(int(JANELA_SEGUNDOS))},
            )
        return await call_next(request)
