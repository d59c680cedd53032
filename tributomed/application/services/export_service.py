# tributomed/application/services/export_service.py
from __future__ import annotations

import csv
import io

from ..dtos.analise_dto import AnaliseDTO


class ExportService:
    def exportar_json(self, analise: AnaliseDTO) -> str:
        return analise.model_dump_json(indent=2)

    def exportar_csv(self, analise: AnaliseDTO) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        # Dados do cliente
        output.write("# DADOS DO CLIENTE\n")
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["Tipo de Cliente", analise.tipo_cliente])
        writer.writerow(["Empresa", analise.empresa or ""])
        writer.writerow(["CNPJ", analise.cnpj or ""])
        writer.writerow(["Faturamento Mensal", analise.faturamento_mensal])
        writer.writerow(["CNAEs", " | ".join(analise.cnaes)])
        writer.writerow(["Melhor Cenario", analise.melhor_cenario.nome if analise.melhor_cenario else ""])
        output.write("\n")

        output.write("# CENARIOS\n")
        writer.writerow(["Cenario", "Elegivel", "Imposto Total", "Aliquota Efetiva", "Lucro Distribuivel"])
        for c in analise.cenarios:
            writer.writerow([c.nome, c.elegivel, c.imposto_total, c.aliquota_efetiva, c.lucro_distribuivel])
        output.write("\n")

        output.write("# COMPOSICAO\n")
        writer.writerow(["Cenario", "Tributo", "Valor", "Aliquota"])
        for c in analise.cenarios:
            for item in c.composicao:
                writer.writerow([c.nome, item.nome, item.valor, item.aliquota])
        output.write("\n")

        if analise.impactos_irpf:
            output.write("# IMPACTO IRPF\n")
            writer.writerow(["Cenario", "Rendimento Tributavel", "Faixa", "IRPF Devido"])
            for nome, i in analise.impactos_irpf.items():
                writer.writerow([nome, i.rendimento_tributavel, i.faixa, i.irpf_devido])
            output.write("\n")

        output.write("# PROJECOES\n")
        writer.writerow(["Crescimento", "Faturamento Mensal", "Melhor Cenario", "Imposto Total"])
        for p in analise.projecoes:
            writer.writerow([f"{p.crescimento}%", p.faturamento_mensal, p.melhor_cenario or "", p.imposto_total or ""])
        output.write("\n")

        if analise.alertas_compliance:
            output.write("# ALERTAS DE COMPLIANCE\n")
            writer.writerow(["Tipo", "Titulo", "Descricao"])
            for a in analise.alertas_compliance:
                writer.writerow([a.tipo, a.titulo, a.descricao])
            output.write("\n")

        if analise.impacto_reforma:
            r = analise.impacto_reforma
            output.write("# REFORMA TRIBUTARIA\n")
            writer.writerow(["Regime Atual", r.regime_atual])
            writer.writerow(["Carga Atual", r.carga_atual.get("total") or ""])
            writer.writerow(["Carga 2033", r.projecao_2033.get("total") or ""])
            writer.writerow(["Diferenca", r.projecao_2033.get("diferenca_vs_atual") or ""])
            writer.writerow(["Variacao (%)", r.projecao_2033.get("percentual_mudanca") or ""])

        return output.getvalue()
