# sistemas/titulos_receber/router.py
"""
Router de Títulos a Receber (proxy do Sankhya)

Endpoints:
- GET /titulos-receber: Títulos a receber com nome do parceiro e classificações
- GET /parceiros: Busca de parceiros (por código ou nome)
- GET /boleto/{nro_titulo}: PDF do boleto do título
"""

from typing import AsyncIterator

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

import config
from services.sankhya import BuscaParceiros, FiltrosReceitas, SankhyaClient
from services.sankhya.constants import (
    PAGE_SIZE_PARCEIROS_PADRAO,
    StatusFinanceiroAPI,
    TipoFinanceiroAPI,
)
from utils.logging_config import get_logger

from .schemas import ErroResponse, ParceirosResponse, TitulosReceberResponse
from .services import TitulosReceberService

logger = get_logger(__name__)

router = APIRouter(tags=["Títulos a Receber"])


async def get_sankhya_client() -> AsyncIterator[SankhyaClient]:
    """Cliente Sankhya por requisição (o token em cache é compartilhado)."""
    async with SankhyaClient() as client:
        yield client


def _erro(mensagem: str, e: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": mensagem, "details": str(e)},
    )


# ============================================
# Endpoints
# ============================================

@router.get(
    "/titulos-receber",
    response_model=TitulosReceberResponse,
    responses={500: {"model": ErroResponse}},
)
async def listar_titulos_receber(
    pagina: int = Query(1, ge=1),
    codigo_empresa: str = Query(config.CODIGO_EMPRESA_PADRAO, alias="codigoEmpresa"),
    codigo_parceiro: str = Query("", alias="codigoParceiro"),
    status_financeiro: str = Query(StatusFinanceiroAPI.TODOS.value, alias="statusFinanceiro"),
    tipo_financeiro: str = Query(TipoFinanceiroAPI.TODOS.value, alias="tipoFinanceiro"),
    data_negociacao_inicio: str = Query("", alias="dataNegociacaoInicio"),
    data_negociacao_final: str = Query("", alias="dataNegociacaoFinal"),
    client: SankhyaClient = Depends(get_sankhya_client),
):
    """
    Lista títulos a receber.

    statusFinanceiro: 1 = Aberto, 2 = Baixado, 3 = Todos
    tipoFinanceiro: 1 = Real, 2 = Provisão, 3 = Todos
    """
    filtros = FiltrosReceitas(
        pagina=pagina,
        codigo_empresa=codigo_empresa,
        codigo_parceiro=codigo_parceiro,
        status_financeiro=status_financeiro,
        tipo_financeiro=tipo_financeiro,
        data_negociacao_inicio=data_negociacao_inicio,
        data_negociacao_final=data_negociacao_final,
    )

    try:
        resultado = await TitulosReceberService(client).listar(filtros)
    except Exception as e:
        logger.exception("Erro ao buscar títulos a receber", erro=str(e))
        return _erro("Erro ao buscar títulos a receber", e)

    return resultado.to_dict()


@router.get(
    "/parceiros",
    response_model=ParceirosResponse,
    responses={500: {"model": ErroResponse}},
)
async def listar_parceiros(
    page: int = Query(1, ge=1),
    page_size: int = Query(PAGE_SIZE_PARCEIROS_PADRAO, ge=1, le=500, alias="pageSize"),
    search_name: str = Query("", alias="searchName"),
    search_code: str = Query("", alias="searchCode"),
    client: SankhyaClient = Depends(get_sankhya_client),
):
    """Busca parceiros por código exato (searchCode) ou parte do nome (searchName)."""
    busca = BuscaParceiros(
        page=page,
        page_size=page_size,
        search_name=search_name,
        search_code=search_code,
    )

    try:
        pagina = await client.buscar_parceiros(busca)
    except Exception as e:
        logger.exception("Erro ao buscar parceiros", erro=str(e))
        return _erro("Erro ao buscar parceiros", e)

    return pagina.to_dict()


@router.get(
    "/boleto/{nro_titulo}",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"model": ErroResponse},
        500: {"model": ErroResponse},
    },
)
async def baixar_boleto(
    nro_titulo: str,
    client: SankhyaClient = Depends(get_sankhya_client),
):
    """PDF do boleto para download (boleto_<nro>.pdf)."""
    try:
        pdf = await client.baixar_boleto(nro_titulo)
    except Exception as e:
        logger.exception("Erro ao gerar boleto", nro_titulo=nro_titulo, erro=str(e))
        return _erro("Erro ao gerar boleto", e)

    if not pdf:
        return JSONResponse(
            status_code=404,
            content={"error": "Boleto não encontrado", "details": f"Título {nro_titulo}"},
        )

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="boleto_{nro_titulo}.pdf"'},
    )
