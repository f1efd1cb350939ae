# services/sankhya/constants.py
"""
Constantes e enums da integração com o Sankhya.

Centraliza os códigos aceitos pela API de receitas, os rótulos exibidos no
painel e os nomes dos serviços do gateway.
"""

from enum import Enum
from typing import FrozenSet, Tuple


# ==================================================
# FILTROS DA API DE RECEITAS
# ==================================================

class StatusFinanceiroAPI(str, Enum):
    """Códigos do parâmetro statusFinanceiro."""
    ABERTO = "1"
    BAIXADO = "2"
    TODOS = "3"


class TipoFinanceiroAPI(str, Enum):
    """Códigos do parâmetro tipoFinanceiro (tipo de movimento)."""
    REAL = "1"
    PROVISAO = "2"
    TODOS = "3"


NOMES_TIPO_MOVIMENTO = {
    TipoFinanceiroAPI.REAL.value: "Real",
    TipoFinanceiroAPI.PROVISAO.value: "Provisão",
    TipoFinanceiroAPI.TODOS.value: "Todos",
}


# ==================================================
# CLASSIFICAÇÕES EXIBIDAS
# ==================================================

class StatusTitulo(str, Enum):
    ABERTO = "Aberto"
    VENCIDO = "Vencido"
    BAIXADO = "Baixado"


class TipoFinanceiroTitulo(str, Enum):
    """Tipo individual do título. Nunca "Todos"."""
    REAL = "Real"
    PROVISAO = "Provisão"


class TipoTitulo(str, Enum):
    BOLETO = "Boleto"
    DUPLICATA = "Duplicata"


# Valores do campo `provisao` que indicam título de provisão
VALORES_PROVISAO: Tuple = (True, "S", 1, "1")


# ==================================================
# GATEWAY (service.sbr)
# ==================================================

SERVICO_LOAD_RECORDS = "CRUDServiceProvider.loadRecords"
SERVICO_BOLETO = "BoletoSP.buildPreVisualizacao"

ENTIDADE_PARCEIRO = "Parceiro"
CAMPOS_PARCEIRO = ("CODPARC", "NOMEPARC", "RAZAOSOCIAL", "CGC_CPF")

# status do envelope do gateway
GATEWAY_STATUS_OK = "1"
GATEWAY_STATUS_SESSAO_EXPIRADA = "3"

# Respostas HTTP que invalidam o token em cache
STATUS_HTTP_SESSAO_EXPIRADA: FrozenSet[int] = frozenset({401, 403})


# ==================================================
# PADRÕES
# ==================================================

PAGINACAO_VAZIA = {
    "page": "1",
    "offset": "0",
    "total": "0",
    "hasMore": "false",
}

PAGE_SIZE_PARCEIROS_PADRAO = 50


def nome_parceiro_padrao(codigo) -> str:
    """Nome exibido quando o parceiro não é encontrado."""
    return f"Parceiro {codigo}"
