# tributomed/domain/holding/documentos.py
#
# Minutas em Markdown geradas a partir do diagnostico: protocolo familiar
# (acordo de socios preventivo) e lista de bens para integralizacao.
from __future__ import annotations

from tributomed.domain.texto import formatar_numero_br

from .entities import DiagnosticoHolding, PapelFamiliar, SucessaoGestao, TipoAtivo

_AGREGADOS_PERMITIDOS = (
    "Fica PERMITIDA a participacao societaria de conjuges/companheiros dos herdeiros, desde que aprovada "
    "por unanimidade."
)
_AGREGADOS_VEDADOS = (
    "Fica expressamente VEDADA a participacao de conjuges e companheiros (genros/noras) no quadro "
    "societario. Em caso de falecimento de socio casado, seus herdeiros diretos assumem, sendo o conjuge "
    "indenizado em dinheiro se houver direito a meacao, jamais em quotas."
)
_MEDIACAO = (
    "As partes concordam em submeter qualquer disputa a uma Camara de Mediacao e Arbitragem Privada, "
    "renunciando expressamente a Justica Comum, visando sigilo e celeridade."
)
_FORO = "As partes elegem o foro da Comarca da Sede para dirimir conflitos."

_GESTAO = {
    SucessaoGestao.FAMILIA: "- Pelo herdeiro mais velho, ou aquele designado em testamento.",
    SucessaoGestao.VOTO: "- Por administrador eleito pela maioria do capital social, podendo ser socio ou nao.",
    SucessaoGestao.PROFISSIONAL: (
        "- Obrigatoriamente por um Gestor Profissional de mercado, nao pertencente a familia."
    ),
}

_TIPOS_ATIVO = {
    TipoAtivo.IMOVEL: "Imovel",
    TipoAtivo.FINANCEIRO: "Aplicacao financeira",
    TipoAtivo.VEICULO: "Veiculo",
    TipoAtivo.QUOTA_EMPRESA: "Quotas de empresa",
    TipoAtivo.PROPRIEDADE_INTELECTUAL: "Propriedade intelectual",
}


def gerar_protocolo_familiar(diagnostico: DiagnosticoHolding) -> str:
    fundadores = [m.nome for m in diagnostico.membros(PapelFamiliar.PATRIARCA, PapelFamiliar.MATRIARCA)]
    herdeiros = ", ".join(m.nome for m in diagnostico.membros(PapelFamiliar.HERDEIRO))
    nomes_fundadores = " e ".join(fundadores)
    familia = nomes_fundadores.split(" ")[0].upper() if fundadores else ""
    g = diagnostico.governanca

    linhas = [
        f"# PROTOCOLO FAMILIAR DA FAMILIA {familia}".rstrip(),
        "",
        f"**CONSIDERANDO** a necessidade de perpetuar o patrimonio construido por **{nomes_fundadores}**;",
        "**CONSIDERANDO** a intencao de profissionalizar a gestao e evitar conflitos futuros entre os "
        f"herdeiros ({herdeiros});",
        "",
        'ESTABELECEM as seguintes "Regras de Ouro":',
        "",
        "## 1. DA ENTRADA DE AGREGADOS (GENROS E NORAS)",
        _AGREGADOS_PERMITIDOS if g.permitir_agregados else _AGREGADOS_VEDADOS,
        "",
        "## 2. DA RESOLUCAO DE CONFLITOS (MEDIACAO)",
        _MEDIACAO if g.mediacao_obrigatoria else _FORO,
        "",
        "## 3. DA VENDA DE ATIVOS IMOBILIARIOS",
        "Para a alienacao, oneracao ou permuta de bens imoveis da sociedade, sera necessaria a aprovacao de "
        f"**{g.quorum_venda}% do Capital Social Votante**.",
        "",
        "## 4. DA DISTRIBUICAO DE LUCROS",
        f"A sociedade distribuira, obrigatoriamente, o minimo de **{g.dividendo_minimo}% do Lucro Liquido** "
        "do exercicio, salvo decisao unanime em contrario para reinvestimento.",
        "",
        "## 5. DA GESTAO E SUCESSAO",
        "Na ausencia dos fundadores, a administracao sera exercida por:",
        _GESTAO[g.sucessao_gestao],
        "",
        "Local e Data: ______________________.",
    ]
    return "\n".join(linhas)


def gerar_lista_integralizacao(diagnostico: DiagnosticoHolding) -> str:
    blocos = [
        "\n".join(
            (
                f"**BEM:** {ativo.nome}",
                f"**TIPO:** {_TIPOS_ATIVO.get(ativo.tipo, 'Outro')}",
                f"**VALOR DE INTEGRALIZACAO:** R$ {formatar_numero_br(ativo.valor_contabil)} (Valor Historico/IR)",
                "**DESCRICAO:** Integralizado pelo socio [NOME], conforme matricula/documento de origem.",
            )
        )
        for ativo in diagnostico.ativos
    ]
    return "\n\n".join(blocos)
