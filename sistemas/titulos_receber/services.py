# sistemas/titulos_receber/services.py
"""
Serviço de Títulos a Receber.

Orquestra a busca no Sankhya:
1. Login (token em cache)
2. Página de receitas
3. Nome de cada parceiro distinto (uma consulta por código)
4. Classificações de exibição (status, tipo financeiro, tipo de título)
"""

from datetime import date
from typing import Any, Dict, List, Optional

from services.sankhya import (
    Boleto,
    FiltrosReceitas,
    ResultadoTitulos,
    SankhyaClient,
    Titulo,
)
from services.sankhya.constants import (
    VALORES_PROVISAO,
    StatusFinanceiroAPI,
    StatusTitulo,
    TipoFinanceiroTitulo,
    TipoTitulo,
    nome_parceiro_padrao,
)
from utils.logging_config import get_logger
from utils.timezone import hoje_local, parse_data_sankhya, parte_data

logger = get_logger(__name__)


# ============================================
# Classificações
# ============================================

def determinar_status(status_api: str, data_vencimento: Optional[str], hoje: Optional[date] = None) -> str:
    """
    Status exibido do título.

    Derivado do filtro statusFinanceiro usado na consulta e da data de
    vencimento:
    - "2" (Baixado) -> Baixado
    - "1" (Aberto) ou "3" (Todos) -> Vencido se o vencimento for anterior a
      hoje, senão Aberto
    - qualquer outro valor -> Aberto

    Vencimento ausente ou inválido conta como Aberto.
    """
    if status_api == StatusFinanceiroAPI.BAIXADO.value:
        return StatusTitulo.BAIXADO.value

    if status_api in (StatusFinanceiroAPI.ABERTO.value, StatusFinanceiroAPI.TODOS.value):
        hoje = hoje or hoje_local()
        vencimento = parse_data_sankhya(data_vencimento)
        if vencimento is not None and vencimento < hoje:
            return StatusTitulo.VENCIDO.value
        return StatusTitulo.ABERTO.value

    return StatusTitulo.ABERTO.value


def determinar_tipo_financeiro(provisao: Any) -> str:
    """Provisão quando o campo provisao é True/"S"/1/"1"; Real nos demais casos."""
    if provisao in VALORES_PROVISAO:
        return TipoFinanceiroTitulo.PROVISAO.value
    return TipoFinanceiroTitulo.REAL.value


def determinar_tipo_titulo(boleto: Boleto) -> str:
    return TipoTitulo.BOLETO.value if boleto.nosso_numero else TipoTitulo.DUPLICATA.value


def mapear_titulo(
    item: Dict[str, Any],
    nome_parceiro: Optional[str],
    status_api: str,
    hoje: Optional[date] = None,
) -> Titulo:
    """Converte um registro de /v1/financeiros/receitas no formato do painel."""
    codigo_parceiro = item.get("codigoParceiro")
    boleto = Boleto.from_api(item.get("boleto"))
    tipo_financeiro = determinar_tipo_financeiro(item.get("provisao"))

    if tipo_financeiro == TipoFinanceiroTitulo.PROVISAO.value:
        logger.debug(
            "Título de provisão",
            codigo_financeiro=item.get("codigoFinanceiro"),
            provisao=item.get("provisao"),
        )

    conta = item.get("codigoContaBancaria")

    return Titulo(
        nro_titulo=str(item.get("codigoFinanceiro", "")),
        parceiro=nome_parceiro or nome_parceiro_padrao(codigo_parceiro),
        cod_parceiro=str(codigo_parceiro if codigo_parceiro is not None else ""),
        valor=item.get("valorParcela"),
        data_vencimento=parte_data(item.get("dataVencimento")),
        data_negociacao=parte_data(item.get("dataNegociacao")),
        status=determinar_status(status_api, item.get("dataVencimento"), hoje),
        tipo_financeiro=tipo_financeiro,
        tipo_titulo=determinar_tipo_titulo(boleto),
        conta_bancaria=f"Conta {conta}" if conta else None,
        historico=item.get("observacao"),
        numero_parcela=item.get("numeroParcela"),
        origem_financeiro=item.get("origemFinanceiro"),
        codigo_empresa=item.get("codigoEmpresa"),
        codigo_natureza=item.get("codigoNatureza"),
        boleto=boleto,
    )


# ============================================
# Serviço
# ============================================

class TitulosReceberService:
    """
    Lista títulos a receber enriquecidos com o nome do parceiro.

    Uso:
        async with SankhyaClient() as client:
            service = TitulosReceberService(client)
            resultado = await service.listar(FiltrosReceitas(codigo_parceiro="10"))
    """

    def __init__(self, client: SankhyaClient):
        self.client = client

    async def _nomes_parceiros(self, codigos: List[Any]) -> Dict[Any, str]:
        """
        Consulta cada parceiro em sequência.

        Falha em um parceiro não interrompe a listagem; o título recebe o
        nome padrão "Parceiro <código>".
        """
        nomes: Dict[Any, str] = {}
        for codigo in codigos:
            try:
                parceiro = await self.client.buscar_parceiro(str(codigo))
            except Exception as e:
                logger.error("Erro ao buscar parceiro", codigo_parceiro=codigo, erro=str(e))
                continue

            if parceiro and parceiro.nome_exibicao:
                nomes[codigo] = parceiro.nome_exibicao
        return nomes

    async def listar(self, filtros: FiltrosReceitas, hoje: Optional[date] = None) -> ResultadoTitulos:
        """
        Busca uma página de títulos.

        Raises:
            SankhyaError: Falha no login ou na consulta de receitas
        """
        data = await self.client.listar_receitas(filtros)
        financeiros = data.get("financeiros") or []

        # Códigos distintos na ordem em que aparecem
        codigos = list(dict.fromkeys(
            item.get("codigoParceiro") for item in financeiros
            if item.get("codigoParceiro") is not None
        ))
        nomes = await self._nomes_parceiros(codigos)

        hoje = hoje or hoje_local()
        titulos = [
            mapear_titulo(item, nomes.get(item.get("codigoParceiro")), filtros.status_financeiro, hoje)
            for item in financeiros
        ]

        logger.info(
            "Títulos a receber carregados",
            quantidade=len(titulos),
            parceiros=len(codigos),
            pagina=filtros.pagina,
        )

        return ResultadoTitulos(titulos=titulos, pagination=data.get("pagination"))
