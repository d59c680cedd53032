# tributomed/domain/tributos/enums.py
from enum import StrEnum


class Anexo(StrEnum):
    I = "I"      # Comercio
    II = "II"    # Industria
    III = "III"  # Servicos (Fator R >= 28%)
    IV = "IV"    # Servicos com CPP fora do DAS
    V = "V"      # Servicos intelectuais


class TipoAtividade(StrEnum):
    COMERCIO = "comercio"
    SERVICO = "servico"
    INDUSTRIA = "industria"


class TipoPresumido(StrEnum):
    GERAL = "geral"
    HOSPITALAR = "hospitalar"
    COMERCIO = "comercio"


class CategoriaCenario(StrEnum):
    PF = "pf"
    PJ = "pj"


class TipoCenario(StrEnum):
    CARNE_LEAO = "carne_leao"
    CLT = "clt"
    MEI = "mei"
    SIMPLES_ANEXO_III = "simples_anexo_iii"
    SIMPLES_ANEXO_V = "simples_anexo_v"
    SIMPLES_MISTO = "simples_misto"
    PRESUMIDO = "presumido"
    PRESUMIDO_UNIPROFISSIONAL = "presumido_uniprofissional"
    PRESUMIDO_HOSPITALAR = "presumido_hospitalar"
    PRESUMIDO_MISTO = "presumido_misto"
    LUCRO_REAL = "lucro_real"
