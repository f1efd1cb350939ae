# sistemas/titulos_receber/router_pages.py
"""
Página de Títulos a Receber (Jinja2).

A página só consulta o Sankhya quando o usuário clica em "Buscar Títulos"
(parâmetro buscar=1) com parceiro e tipo de movimento preenchidos.
"""

from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.templating import Jinja2Templates

import config
from services.sankhya import BuscaParceiros, FiltrosReceitas, Parceiro, ResultadoTitulos, SankhyaClient
from services.sankhya.constants import NOMES_TIPO_MOVIMENTO, StatusFinanceiroAPI
from utils.logging_config import get_logger

from . import apresentacao
from .router import get_sankhya_client
from .services import TitulosReceberService

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["moeda"] = apresentacao.formatar_moeda
templates.env.filters["data_br"] = apresentacao.formatar_vencimento
templates.env.globals["badge_status"] = apresentacao.badge_status
templates.env.globals["badge_tipo_financeiro"] = apresentacao.badge_tipo_financeiro
templates.env.globals["pode_baixar_boleto"] = apresentacao.pode_baixar_boleto
templates.env.globals["motivo_boleto_indisponivel"] = apresentacao.motivo_boleto_indisponivel

router = APIRouter(tags=["Páginas"])


async def _carregar_parceiros(client: SankhyaClient, termo: str, selecionado: str) -> List[Parceiro]:
    """
    Opções do seletor de parceiro.

    Termo com 2+ caracteres pesquisa por nome; sem termo carrega os 50
    primeiros. O parceiro selecionado sempre aparece na lista.
    """
    busca = BuscaParceiros(page=1, page_size=50)
    if len(termo) >= apresentacao.MIN_CARACTERES_BUSCA_PARCEIRO:
        busca.search_name = termo

    try:
        parceiros = (await client.buscar_parceiros(busca)).parceiros
        if selecionado and all(p.codigo != selecionado for p in parceiros):
            atual = await client.buscar_parceiro(selecionado)
            if atual:
                parceiros.insert(0, atual)
    except Exception as e:
        logger.error("Erro ao carregar parceiros", erro=str(e))
        return []

    return parceiros


@router.get("/titulos-receber")
async def pagina_titulos_receber(
    request: Request,
    parceiro: str = Query(""),
    tipo_movimento: str = Query("", alias="tipoMovimento"),
    pagina: int = Query(1, ge=1),
    busca_parceiro: str = Query("", alias="buscaParceiro"),
    buscar: bool = Query(False),
    client: SankhyaClient = Depends(get_sankhya_client),
):
    """Filtros obrigatórios, tabela de títulos, paginação e detalhes."""
    parceiros = await _carregar_parceiros(client, busca_parceiro.strip(), parceiro)

    resultado: Optional[ResultadoTitulos] = None
    titulos = []
    aviso: Optional[str] = None
    erro: Optional[str] = None
    sucesso: Optional[str] = None

    if buscar:
        aviso = apresentacao.validar_filtros(parceiro, tipo_movimento)

    if buscar and aviso is None:
        filtros = FiltrosReceitas(
            pagina=pagina,
            codigo_empresa=config.CODIGO_EMPRESA_PADRAO,
            codigo_parceiro=parceiro,
            status_financeiro=StatusFinanceiroAPI.TODOS.value,
            tipo_financeiro=tipo_movimento,
        )
        try:
            resultado = await TitulosReceberService(client).listar(filtros)
            titulos = apresentacao.ordenar_titulos(resultado.titulos)
            sucesso = apresentacao.mensagem_encontrados(len(titulos))
        except Exception as e:
            logger.error("Erro ao carregar títulos", erro=str(e))
            erro = apresentacao.MSG_ERRO_CARREGAR
            resultado = None

    paginacao = resultado.paginacao_exibicao if resultado else None

    return templates.TemplateResponse(
        "titulos_receber.html",
        {
            "request": request,
            "parceiros": parceiros,
            "parceiro_selecionado": parceiro,
            "tipo_movimento": tipo_movimento,
            "tipos_movimento": NOMES_TIPO_MOVIMENTO,
            "busca_parceiro": busca_parceiro,
            "pagina": pagina,
            "titulos": titulos,
            "paginacao": paginacao,
            "total_registros": apresentacao.total_registros(paginacao),
            "tem_proxima": apresentacao.tem_proxima_pagina(paginacao),
            "mensagem_vazia": apresentacao.mensagem_tabela_vazia(bool(parceiro and tipo_movimento)),
            "aviso": aviso,
            "erro": erro,
            "sucesso": sucesso,
        },
    )
