# tributomed/infrastructure/pdf_generator.py
from __future__ import annotations

import re
from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tributomed.application.dtos.analise_dto import AnaliseDTO

_NEGRITO = re.compile(r"\*\*(.+?)\*\*")


def gerar_pdf_analise(analise: AnaliseDTO) -> bytes:
    """Generate the PDF report of a client analysis.

    Raises RuntimeError if weasyprint is not installed.
    """
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except (ImportError, OSError) as err:
        msg = "PDF export requires weasyprint. Install with: pip install tributomed[pdf]"
        raise RuntimeError(msg) from err

    html = _build_html(analise)
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def _markdown_simples(texto: str) -> str:
    return _NEGRITO.sub(r"<strong>\1</strong>", escape(texto))


def _build_html(analise: AnaliseDTO) -> str:
    sections: list[str] = []
    titulo = escape(analise.empresa or "Cliente")

    # Header
    sections.append(f"""
    <h1>Planejamento Tributario - {titulo}</h1>
    <p class="disclaimer">Gerado em {analise.criada_em[:10]}. Valores estimados com a legislacao de 2025.</p>
    """)

    # Dados do cliente
    melhor = analise.melhor_cenario
    sections.append(f"""
    <h2>Dados do Cliente</h2>
    <table>
        <tr><td class="label">Tipo de Cliente</td><td>{escape(analise.tipo_cliente)}</td></tr>
        <tr><td class="label">CNPJ</td><td>{escape(analise.cnpj or "-")}</td></tr>
        <tr><td class="label">Faturamento Mensal</td><td>R$ {analise.faturamento_mensal}</td></tr>
        <tr><td class="label">CNAEs</td><td>{escape(", ".join(analise.cnaes) or "-")}</td></tr>
        <tr><td class="label">Natureza Juridica</td><td>{escape(analise.natureza_juridica)}</td></tr>
        <tr><td class="label">Melhor Cenario</td><td>{escape(melhor.nome) if melhor else "-"}</td></tr>
    </table>
    """)

    # Resumo
    sections.append(f"""
    <h2>Resumo Executivo</h2>
    <div class="resumo">{_markdown_simples(analise.resumo_executivo)}</div>
    """)

    # Cenarios
    cenario_rows = "".join(
        f"<tr><td>{escape(c.nome)}</td><td>{'Sim' if c.elegivel else 'Nao'}</td>"
        f"<td>R$ {c.imposto_total}</td><td>{c.aliquota_efetiva}%</td><td>R$ {c.lucro_distribuivel}</td></tr>"
        for c in analise.cenarios
    )
    sections.append(f"""
    <h2>Cenarios Tributarios</h2>
    <table>
        <tr><th>Cenario</th><th>Elegivel</th><th>Imposto</th><th>Aliquota</th><th>Lucro Distribuivel</th></tr>
        {cenario_rows}
    </table>
    """)

    # Projecoes
    projecao_rows = "".join(
        f"<tr><td>+{p.crescimento}%</td><td>R$ {p.faturamento_mensal}</td>"
        f"<td>{escape(p.melhor_cenario or '-')}</td><td>R$ {p.imposto_total or '-'}</td></tr>"
        for p in analise.projecoes
    )
    sections.append(f"""
    <h2>Projecoes</h2>
    <table>
        <tr><th>Crescimento</th><th>Faturamento</th><th>Melhor Cenario</th><th>Imposto</th></tr>
        {projecao_rows}
    </table>
    <p>{escape(analise.ponto_equilibrio.descricao)}</p>
    """)

    # Alertas
    if analise.alertas_compliance:
        alerta_rows = "".join(
            f"<tr><td>{a.tipo}</td><td>{escape(a.titulo)}</td><td>{escape(a.descricao)}</td></tr>"
            for a in analise.alertas_compliance
        )
        sections.append(f"""
        <h2>Alertas de Compliance</h2>
        <table>
            <tr><th>Tipo</th><th>Titulo</th><th>Descricao</th></tr>
            {alerta_rows}
        </table>
        """)

    # Reforma
    if analise.impacto_reforma:
        r = analise.impacto_reforma
        recomendacoes = "".join(f"<li>{escape(rec)}</li>" for rec in r.recomendacoes)
        sections.append(f"""
        <h2>Reforma Tributaria</h2>
        <table>
            <tr><td class="label">Carga atual</td><td>R$ {r.carga_atual.get("total") or "-"}</td></tr>
            <tr><td class="label">CBS + IBS (2033)</td><td>R$ {r.projecao_2033["total"]}</td></tr>
            <tr><td class="label">Variacao</td><td>{r.projecao_2033["percentual_mudanca"]}%</td></tr>
        </table>
        <ul>{recomendacoes}</ul>
        """)

    body = "\n".join(sections)

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Analise - {titulo}</title>
<style>
    body {{ font-family: Arial, sans-serif; margin: 40px; font-size: 11px; color: #333; }}
    h1 {{ font-size: 18px; border-bottom: 2px solid #0f766e; padding-bottom: 8px; }}
    h2 {{ font-size: 14px; margin-top: 24px; color: #0f766e; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 8px; text-align: left; }}
    th {{ background-color: #f5f5f5; font-weight: bold; }}
    .label {{ font-weight: bold; width: 180px; background-color: #f9f9f9; }}
    .resumo {{ white-space: pre-wrap; line-height: 1.5; }}
    .disclaimer {{ font-size: 10px; color: #888; font-style: italic; margin-bottom: 16px; }}
</style>
</head>
<body>
{body}
</body>
</html>"""
