# tributomed/domain/tributos/motor.py
#
# Motor deterministico de cenarios tributarios.
#
# Design decisions:
#   - Gera SEMPRE os oito cenarios base, elegiveis ou nao, para que o cliente
#     veja o custo de cada caminho (ex: quanto economizaria com equiparacao
#     hospitalar). Elegibilidade e informativa, nunca filtra a lista.
#       PF: Carne-Leao, CLT (simulacao)
#       PJ: Simples Anexo III (Fator R), Simples Anexo V, Lucro Presumido,
#           Presumido Uniprofissional (ISS fixo), Presumido Equiparacao
#           Hospitalar, Lucro Real
#   - Com atividades informadas, acrescenta MEI e, havendo duas ou mais
#     atividades, Simples Misto e Presumido Misto.
#   - Cenarios PJ consideram pro-labore de um salario minimo, exceto o Anexo
#     III, cujo pro-labore e elevado ate 28% da receita para atingir o Fator R.
#   - CPP patronal (20%) entra nos cenarios fora do DAS (Presumido e Real).
#
# Invariants:
#   - Lista ordenada por imposto total crescente.
#   - melhor_cenario nunca escolhe cenario inelegivel.
#   - Receita zero produz aliquota efetiva zero (sem divisao por zero).
from __future__ import annotations

from decimal import Decimal

from .constantes import FATOR_R_MINIMO, SALARIO_MINIMO
from .entities import AnaliseProLabore, Atividade, Cenario, ItemTributo, PerfilTributario
from .enums import Anexo, CategoriaCenario, TipoCenario, TipoPresumido
from .folha import calcular_cpp, calcular_inss_prolabore, calcular_irrf
from .iss_municipal import iss_fixo_mensal
from .lucro_presumido_real import calcular_lucro_presumido, calcular_lucro_real, calcular_presumido_misto
from .mei import verificar_mei
from .pessoa_fisica import calcular_carne_leao, calcular_clt
from .simples import calcular_simples, calcular_simples_misto

_CEM = Decimal("100")
_ZERO = Decimal("0")


def _percentual(parte: Decimal, todo: Decimal) -> Decimal:
    return parte / todo * _CEM if todo > 0 else _ZERO


def _pro_labore(base: Decimal) -> AnaliseProLabore:
    inss = calcular_inss_prolabore(base)
    return AnaliseProLabore(base=base, inss=inss, irrf=calcular_irrf(base - inss))


def gerar_cenarios(perfil: PerfilTributario) -> list[Cenario]:
    """Calcula todos os cenarios para o perfil, do mais barato ao mais caro."""
    receita = perfil.faturamento_mensal
    if receita == 0 and perfil.atividades:
        receita = sum((a.receita_mensal for a in perfil.atividades), _ZERO)
    rbt12 = perfil.rbt12 or receita * 12
    folha = perfil.folha_mensal
    iss = perfil.aliquota_iss

    cenarios = [
        _carne_leao(receita, folha),
        _clt(receita),
        _simples_anexo_iii(receita, rbt12, folha),
        _simples_anexo_v(receita, rbt12),
        *_presumidos(receita, perfil),
        _lucro_real(receita, iss, perfil.margem_lucro_real),
    ]
    if perfil.atividades:
        cenarios.append(_mei(receita, perfil.atividades))
        if len(perfil.atividades) >= 2:
            cenarios.append(_simples_misto(receita, perfil.rbt12 or _ZERO, perfil.atividades))
            cenarios.append(_presumido_misto(receita, iss, perfil.atividades))

    return sorted(cenarios, key=lambda c: c.imposto_total)


def melhor_cenario(cenarios: list[Cenario]) -> Cenario | None:
    """Cenario elegivel de menor imposto total."""
    elegiveis = [c for c in cenarios if c.elegivel]
    if not elegiveis:
        return None
    return min(elegiveis, key=lambda c: c.imposto_total)


# ---------- PF ----------


def _carne_leao(receita: Decimal, despesas: Decimal) -> Cenario:
    cl = calcular_carne_leao(receita, despesas)
    return Cenario(
        nome="Carne-Leao (Pessoa Fisica)",
        categoria=CategoriaCenario.PF,
        tipo=TipoCenario.CARNE_LEAO,
        elegivel=True,
        nota_elegibilidade="Disponivel para qualquer profissional autonomo.",
        imposto_total=cl.total,
        aliquota_efetiva=_percentual(cl.total, receita),
        lucro_distribuivel=receita - cl.total - despesas,
        observacoes="INSS autonomo 20% + IRPF progressivo. Geralmente a opcao mais onerosa.",
        composicao=(
            ItemTributo("INSS Autonomo (20%)", cl.inss, Decimal("20")),
            ItemTributo("IRPF Progressivo", cl.irpf),
        ),
    )


def _clt(receita: Decimal) -> Cenario:
    clt = calcular_clt(receita)
    return Cenario(
        nome="CLT (Simulacao como Empregado)",
        categoria=CategoriaCenario.PF,
        tipo=TipoCenario.CLT,
        elegivel=True,
        nota_elegibilidade="Para comparacao: caso fosse contratado como empregado.",
        imposto_total=clt.total,
        aliquota_efetiva=_percentual(clt.total, receita),
        lucro_distribuivel=clt.salario_liquido,
        observacoes=(
            f"Custo total para a empresa: R$ {clt.custo_total_empresa:.2f}. "
            "Inclui INSS patronal, FGTS, RAT e terceiros."
        ),
        composicao=(
            ItemTributo("INSS (Empregado)", clt.inss_empregado),
            ItemTributo("IRRF", clt.irrf_empregado),
            ItemTributo("INSS Patronal", clt.inss_patronal, Decimal("20")),
            ItemTributo("FGTS + RAT", clt.fgts + clt.rat, Decimal("9")),
            ItemTributo("Terceiros (Sistema S)", clt.terceiros, Decimal("5.8")),
        ),
    )


# ---------- Simples ----------


def _simples_anexo_iii(receita: Decimal, rbt12: Decimal, folha: Decimal) -> Cenario:
    fator_r = max(folha, SALARIO_MINIMO) / receita if receita > 0 else _ZERO
    tem_fator_r = fator_r >= FATOR_R_MINIMO
    alvo = max(receita * FATOR_R_MINIMO, SALARIO_MINIMO)

    das = calcular_simples(rbt12, receita, Anexo.III)
    pl = _pro_labore(alvo)
    total = das.imposto + pl.inss + pl.irrf

    if tem_fator_r:
        nota = f"Fator R atual: {fator_r * _CEM:.1f}% >= 28%. Elegivel!"
    else:
        nota = (
            f"Fator R atual: {fator_r * _CEM:.1f}% < 28%. "
            f"Requer pro-labore de R$ {alvo:.2f} para atingir 28%."
        )
    return Cenario(
        nome="Simples Nacional Anexo III (Fator R)",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.SIMPLES_ANEXO_III,
        elegivel=tem_fator_r,
        nota_elegibilidade=nota,
        imposto_total=total,
        aliquota_efetiva=_percentual(total, receita),
        lucro_distribuivel=receita - total - alvo,
        observacoes=f"Aliquota reduzida do Anexo III. Considera pro-labore de R$ {alvo:.2f} (28% da receita).",
        pro_labore=pl,
        composicao=(
            *das.composicao,
            ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
            ItemTributo("IRRF Pro-labore", pl.irrf),
        ),
    )


def _simples_anexo_v(receita: Decimal, rbt12: Decimal) -> Cenario:
    das = calcular_simples(rbt12, receita, Anexo.V)
    pl = _pro_labore(SALARIO_MINIMO)
    total = das.imposto + pl.inss + pl.irrf
    return Cenario(
        nome="Simples Nacional Anexo V",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.SIMPLES_ANEXO_V,
        elegivel=True,
        nota_elegibilidade="Aplicavel quando o Fator R fica abaixo de 28%.",
        imposto_total=total,
        aliquota_efetiva=_percentual(total, receita),
        lucro_distribuivel=receita - total - SALARIO_MINIMO,
        observacoes="Sem otimizacao de Fator R. Pro-labore de um salario minimo.",
        pro_labore=pl,
        composicao=(
            *das.composicao,
            ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
            ItemTributo("IRRF Pro-labore", pl.irrf),
        ),
    )


def _simples_misto(receita: Decimal, rbt12: Decimal, atividades: tuple[Atividade, ...]) -> Cenario:
    das = calcular_simples_misto(rbt12, atividades)
    pl = _pro_labore(SALARIO_MINIMO)
    cpp = calcular_cpp(SALARIO_MINIMO) if any(a.anexo is Anexo.IV for a in atividades) else _ZERO
    total = das.imposto + pl.inss + pl.irrf + cpp
    itens = [
        *das.composicao,
        ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
        ItemTributo("IRRF Pro-labore", pl.irrf),
    ]
    if cpp:
        itens.append(ItemTributo("CPP Patronal (Anexo IV)", cpp, Decimal("20")))
    return Cenario(
        nome="Simples Nacional (Misto)",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.SIMPLES_MISTO,
        elegivel=True,
        nota_elegibilidade="Cada atividade tributada pelo seu Anexo, faixa pelo RBT12 global.",
        imposto_total=total,
        aliquota_efetiva=_percentual(total, receita),
        lucro_distribuivel=receita - total - SALARIO_MINIMO,
        observacoes=f"{len(atividades)} atividades segregadas por Anexo no PGDAS-D.",
        pro_labore=pl,
        composicao=tuple(itens),
    )


def _mei(receita: Decimal, atividades: tuple[Atividade, ...]) -> Cenario:
    mei = verificar_mei(receita * 12, atividades)
    return Cenario(
        nome="MEI (Microempreendedor Individual)",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.MEI,
        elegivel=mei.elegivel,
        nota_elegibilidade=mei.nota,
        imposto_total=mei.total,
        aliquota_efetiva=_percentual(mei.total, receita),
        lucro_distribuivel=receita - mei.total,
        observacoes="DAS fixo mensal. Vedado a atividades regulamentadas (medicina, odontologia).",
        composicao=(
            ItemTributo("INSS (5% do salario minimo)", mei.inss, Decimal("5")),
            ItemTributo("ICMS", mei.icms),
            ItemTributo("ISS", mei.iss),
        ),
    )


# ---------- Presumido / Real ----------


def _presumidos(receita: Decimal, perfil: PerfilTributario) -> list[Cenario]:
    iss = perfil.aliquota_iss
    pl = _pro_labore(SALARIO_MINIMO)
    cpp = calcular_cpp(SALARIO_MINIMO)
    encargos = cpp + pl.inss + pl.irrf

    geral = calcular_lucro_presumido(receita, TipoPresumido.GERAL, iss)
    total_geral = geral.total + encargos

    sup = calcular_lucro_presumido(receita, TipoPresumido.GERAL, _ZERO)
    fixo = iss_fixo_mensal(perfil.municipio) * perfil.numero_socios
    total_sup = sup.total + fixo + encargos
    economia_fixo = geral.iss - fixo

    hosp = calcular_lucro_presumido(receita, TipoPresumido.HOSPITALAR, iss)
    total_hosp = hosp.total + encargos

    def _cenario(nome: str, tipo: TipoCenario, elegivel: bool, nota: str, total: Decimal, obs: str,
                 itens: tuple[ItemTributo, ...]) -> Cenario:
        return Cenario(
            nome=nome,
            categoria=CategoriaCenario.PJ,
            tipo=tipo,
            elegivel=elegivel,
            nota_elegibilidade=nota,
            imposto_total=total,
            aliquota_efetiva=_percentual(total, receita),
            lucro_distribuivel=receita - total - SALARIO_MINIMO,
            observacoes=obs,
            pro_labore=pl,
            composicao=(*itens, ItemTributo("CPP Patronal", cpp, Decimal("20")),
                        ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
                        ItemTributo("IRRF Pro-labore", pl.irrf)),
        )

    return [
        _cenario(
            "Lucro Presumido",
            TipoCenario.PRESUMIDO,
            True,
            f"Faturamento anual ate R$ 78 milhoes. ISS: {iss}%.",
            total_geral,
            "Base de presuncao 32% para servicos. Inclui CPP sobre pro-labore.",
            (
                ItemTributo("PIS/COFINS", geral.pis_cofins, Decimal("3.65")),
                ItemTributo("IRPJ/CSLL", geral.irpj_csll),
                ItemTributo("ISS", geral.iss, iss),
            ),
        ),
        _cenario(
            "Lucro Presumido Uniprofissional (ISS Fixo)",
            TipoCenario.PRESUMIDO_UNIPROFISSIONAL,
            perfil.sociedade_uniprofissional,
            "Empresa cadastrada como Sociedade Uniprofissional. ISS Fixo aplicavel."
            if perfil.sociedade_uniprofissional
            else "Requer registro como Sociedade Uniprofissional (SUP) no municipio. Consulte a legislacao local.",
            total_sup,
            f"ISS Fixo: R$ {fixo:.2f}/mes ({perfil.numero_socios} socio(s)). "
            f"Economia vs ISS variavel: R$ {economia_fixo:.2f}/mes.",
            (
                ItemTributo("PIS/COFINS", sup.pis_cofins, Decimal("3.65")),
                ItemTributo("IRPJ/CSLL", sup.irpj_csll),
                ItemTributo("ISS Fixo (SUP)", fixo),
            ),
        ),
        _cenario(
            "Lucro Presumido Equiparacao Hospitalar",
            TipoCenario.PRESUMIDO_HOSPITALAR,
            perfil.equiparacao_hospitalar,
            "Empresa atende requisitos ANVISA para equiparacao hospitalar."
            if perfil.equiparacao_hospitalar
            else "Requer estrutura cirurgica, alvara sanitario e conformidade com a Lei 9.249/95.",
            total_hosp,
            "Base de presuncao reduzida: IRPJ 8%, CSLL 12%. Requer documentacao ANVISA.",
            (
                ItemTributo("PIS/COFINS", hosp.pis_cofins, Decimal("3.65")),
                ItemTributo("IRPJ/CSLL (Reduzido)", hosp.irpj_csll),
                ItemTributo("ISS", hosp.iss, iss),
            ),
        ),
    ]


def _presumido_misto(receita: Decimal, iss: Decimal, atividades: tuple[Atividade, ...]) -> Cenario:
    lp = calcular_presumido_misto(atividades, iss)
    pl = _pro_labore(SALARIO_MINIMO)
    cpp = calcular_cpp(SALARIO_MINIMO)
    total = lp.total + cpp + pl.inss + pl.irrf
    itens = [
        ItemTributo("PIS/COFINS", lp.pis_cofins, Decimal("3.65")),
        ItemTributo("IRPJ/CSLL", lp.irpj_csll),
    ]
    if lp.iss:
        itens.append(ItemTributo("ISS", lp.iss, iss))
    if lp.icms:
        itens.append(ItemTributo("ICMS", lp.icms))
    itens += [
        ItemTributo("CPP Patronal", cpp, Decimal("20")),
        ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
        ItemTributo("IRRF Pro-labore", pl.irrf),
    ]
    return Cenario(
        nome="Lucro Presumido (Misto)",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.PRESUMIDO_MISTO,
        elegivel=True,
        nota_elegibilidade="Bases de presuncao por atividade (8%/12% comercio, 32% servicos).",
        imposto_total=total,
        aliquota_efetiva=_percentual(total, receita),
        lucro_distribuivel=receita - total - SALARIO_MINIMO,
        observacoes="ICMS estimado sobre a receita de comercio e industria.",
        pro_labore=pl,
        composicao=tuple(itens),
    )


def _lucro_real(receita: Decimal, iss: Decimal, margem: Decimal) -> Cenario:
    lr = calcular_lucro_real(receita, margem, iss)
    pl = _pro_labore(SALARIO_MINIMO)
    cpp = calcular_cpp(SALARIO_MINIMO)
    total = lr.total + cpp + pl.inss + pl.irrf
    return Cenario(
        nome="Lucro Real",
        categoria=CategoriaCenario.PJ,
        tipo=TipoCenario.LUCRO_REAL,
        elegivel=True,
        nota_elegibilidade=(
            "Obrigatorio para faturamento acima de R$ 78 milhoes. Vantajoso se a margem for inferior a 32%."
        ),
        imposto_total=total,
        aliquota_efetiva=_percentual(total, receita),
        lucro_distribuivel=receita - total - SALARIO_MINIMO,
        observacoes=(
            f"Estimativa com margem de lucro de {margem * _CEM:.0f}%. "
            "PIS/COFINS nao cumulativo (creditos limitados em servicos)."
        ),
        pro_labore=pl,
        composicao=(
            ItemTributo("PIS/COFINS (Nao Cumulativo)", lr.pis_cofins, Decimal("9.25")),
            ItemTributo("IRPJ/CSLL (sobre lucro)", lr.irpj_csll),
            ItemTributo("ISS", lr.iss, iss),
            ItemTributo("CPP Patronal", cpp, Decimal("20")),
            ItemTributo("INSS Pro-labore", pl.inss, Decimal("11")),
            ItemTributo("IRRF Pro-labore", pl.irrf),
        ),
    )
