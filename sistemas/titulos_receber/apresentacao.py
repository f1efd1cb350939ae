# sistemas/titulos_receber/apresentacao.py
"""
Regras de exibição da tabela de Títulos a Receber.

Formatação (moeda, data), badges, ordenação e as validações que o painel faz
antes de buscar títulos ou baixar um boleto.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from services.sankhya import Titulo
from services.sankhya.constants import StatusTitulo, TipoFinanceiroTitulo, TipoTitulo
from utils.timezone import format_data_br

# ============================================
# Mensagens
# ============================================

MSG_SELECIONE_PARCEIRO = "Selecione um parceiro antes de buscar os títulos"
MSG_SELECIONE_TIPO = "Selecione o tipo de movimento antes de buscar os títulos"
MSG_ERRO_CARREGAR = "Erro ao carregar títulos a receber"
MSG_NAO_E_BOLETO = "Este título não é um boleto"
MSG_JA_BAIXADO = "Este título já foi baixado"
MSG_VAZIO_SEM_FILTROS = "Selecione um parceiro e tipo de movimento para buscar os títulos"
MSG_VAZIO_COM_FILTROS = "Nenhum título encontrado para os filtros selecionados"

# Termo mínimo para a busca de parceiros por nome
MIN_CARACTERES_BUSCA_PARCEIRO = 2


# ============================================
# Badges
# ============================================

@dataclass(frozen=True)
class Badge:
    variant: str
    class_name: str


BADGES_STATUS: Dict[str, Badge] = {
    StatusTitulo.ABERTO.value: Badge("outline", "bg-yellow-50 text-yellow-700 border-yellow-300"),
    StatusTitulo.VENCIDO.value: Badge("destructive", ""),
    StatusTitulo.BAIXADO.value: Badge("default", "bg-green-50 text-green-700 border-green-300"),
}

BADGES_TIPO_FINANCEIRO: Dict[str, Badge] = {
    TipoFinanceiroTitulo.REAL.value: Badge("outline", "bg-blue-50 text-blue-700 border-blue-300"),
    TipoFinanceiroTitulo.PROVISAO.value: Badge("outline", "bg-purple-50 text-purple-700 border-purple-300"),
}


def badge_status(status: str) -> Badge:
    """Badge do status; valores desconhecidos usam o estilo de Aberto."""
    return BADGES_STATUS.get(status, BADGES_STATUS[StatusTitulo.ABERTO.value])


def badge_tipo_financeiro(tipo: str) -> Badge:
    return BADGES_TIPO_FINANCEIRO.get(tipo, BADGES_TIPO_FINANCEIRO[TipoFinanceiroTitulo.REAL.value])


# ============================================
# Formatação
# ============================================

def formatar_moeda(valor: Any) -> str:
    """
    Formata como moeda brasileira (R$ 1.234,56).

    Valores não numéricos são devolvidos como texto.
    """
    try:
        numero = float(valor)
    except (TypeError, ValueError):
        return "-" if valor is None else str(valor)

    texto = f"{abs(numero):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    sinal = "-" if numero < 0 else ""
    return f"{sinal}R$ {texto}"


def formatar_vencimento(data: Optional[str]) -> str:
    return format_data_br(data)


# ============================================
# Regras do painel
# ============================================

def validar_filtros(codigo_parceiro: Optional[str], tipo_movimento: Optional[str]) -> Optional[str]:
    """
    Filtros obrigatórios antes da busca.

    Returns:
        Mensagem de erro ou None quando os filtros estão completos
    """
    if not codigo_parceiro:
        return MSG_SELECIONE_PARCEIRO
    if not tipo_movimento:
        return MSG_SELECIONE_TIPO
    return None


def ordenar_titulos(titulos: Iterable[Titulo]) -> List[Titulo]:
    """Ordena por número do título, do maior para o menor."""
    return sorted(titulos, key=lambda t: t.numero_ordenacao, reverse=True)


def motivo_boleto_indisponivel(titulo: Titulo) -> Optional[str]:
    """None quando o boleto pode ser baixado; senão o motivo."""
    if titulo.tipo_titulo != TipoTitulo.BOLETO.value:
        return MSG_NAO_E_BOLETO
    if titulo.status == StatusTitulo.BAIXADO.value:
        return MSG_JA_BAIXADO
    return None


def pode_baixar_boleto(titulo: Titulo) -> bool:
    return motivo_boleto_indisponivel(titulo) is None


def mensagem_encontrados(quantidade: int) -> str:
    return f"{quantidade} título(s) encontrado(s)"


def mensagem_tabela_vazia(filtros_completos: bool) -> str:
    return MSG_VAZIO_COM_FILTROS if filtros_completos else MSG_VAZIO_SEM_FILTROS


def total_registros(paginacao: Optional[Dict[str, Any]]) -> int:
    try:
        return int((paginacao or {}).get("total", 0))
    except (TypeError, ValueError):
        return 0


def tem_proxima_pagina(paginacao: Optional[Dict[str, Any]]) -> bool:
    """Próxima fica desabilitada apenas quando hasMore é "false"."""
    return str((paginacao or {}).get("hasMore", "false")).lower() != "false"
