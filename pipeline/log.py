# pipeline/log.py
#
# Log do job de noticias: cada linha traz o tempo desde o inicio da
# execucao e a etapa (download, parse, carga) que a emitiu.
#
# Design decisions:
#   - stdout com flush: o job roda no terminal ou no agendador, que ja
#     captura a saida.
#   - iniciar_execucao() zera o cronometro a cada run_pipeline, para que
#     execucoes repetidas no mesmo processo nao somem o tempo anterior.
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def iniciar_execucao() -> None:
    global _inicio
    _inicio = time.monotonic()


def log(message: str, etapa: str = "pipeline") -> None:
    """Escreve '[noticias MM:SS etapa] message' no stdout."""
    minutos, segundos = divmod(int(time.monotonic() - _inicio), 60)
    sys.stdout.write(f"[noticias {minutos:02d}:{segundos:02d} {etapa}] {message}\n")
    sys.stdout.flush()
