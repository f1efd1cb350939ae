# utils/timezone.py
"""
POLÍTICA DE DATAS DO PAINEL

REGRAS:
1. "Hoje" é sempre calculado no timezone local configurado (TIMEZONE_LOCAL)
2. Datas vindas do Sankhya chegam como texto ("2024-05-10 00:00:00" ou
   "10/05/2024 00:00:00") e são comparadas apenas pela parte de data
3. Exibição ao usuário sempre em DD/MM/AAAA

USO:
    from utils.timezone import hoje_local, parse_data_sankhya, format_data_br

    vencimento = parse_data_sankhya(item["dataVencimento"])
    vencido = vencimento is not None and vencimento < hoje_local()
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

import pytz

from config import TIMEZONE_LOCAL_NAME

# =============================================================================
# CONFIGURAÇÃO DE TIMEZONE
# =============================================================================

TIMEZONE_LOCAL = pytz.timezone(TIMEZONE_LOCAL_NAME)

UTC = timezone.utc

# Formatos aceitos para a parte de data dos campos do Sankhya
FORMATOS_DATA_SANKHYA = ("%Y-%m-%d", "%d/%m/%Y", "%d%m%Y")


# =============================================================================
# FUNÇÕES PRINCIPAIS
# =============================================================================

def now_utc() -> datetime:
    """Retorna o datetime atual em UTC (timezone-aware)."""
    return datetime.now(UTC)


def now_local() -> datetime:
    """Retorna o datetime atual no timezone local (timezone-aware)."""
    return datetime.now(TIMEZONE_LOCAL)


def hoje_local() -> date:
    """Data de hoje no timezone local. Base da classificação Aberto/Vencido."""
    return now_local().date()


def parte_data(valor: Optional[str]) -> str:
    """
    Retorna o texto antes do primeiro espaço.

    O Sankhya devolve datas com hora ("2024-05-10 00:00:00"); o painel trabalha
    apenas com a data.
    """
    if not valor:
        return ""
    return str(valor).split(" ")[0]


def parse_data_sankhya(valor: Optional[str]) -> Optional[date]:
    """
    Converte uma data do Sankhya em `date`.

    Returns:
        date ou None se o valor for vazio ou não reconhecido
    """
    texto = parte_data(valor)
    if not texto:
        return None

    # ISO com "T" (ex: 2024-05-10T00:00:00)
    texto = texto.split("T")[0]

    for formato in FORMATOS_DATA_SANKHYA:
        try:
            return datetime.strptime(texto, formato).date()
        except ValueError:
            continue
    return None


def format_data_br(valor: Union[str, date, datetime, None]) -> str:
    """
    Formata uma data para exibição (DD/MM/AAAA).

    Aceita `date`, `datetime` ou texto no formato do Sankhya.
    Valores não reconhecidos são devolvidos como vieram; None vira "-".
    """
    if valor is None or valor == "":
        return "-"
    if isinstance(valor, datetime):
        valor = valor.date()
    if isinstance(valor, date):
        return valor.strftime("%d/%m/%Y")

    data = parse_data_sankhya(valor)
    if data is None:
        return str(valor)
    return data.strftime("%d/%m/%Y")
