# services/sankhya/client.py
"""
Cliente para comunicacao com o Sankhya.

Chamadas sequenciais e sem retry. A unica recuperacao de falha e descartar o
token em cache quando o Sankhya responde 401/403 (ou status de sessao
expirada no gateway); a proxima requisicao faz login novamente.
"""

from typing import Any, Dict, Optional

import httpx

from utils.logging_config import get_logger
from .auth import TokenCache, get_token_cache
from .config import SankhyaConfig, get_config
from .constants import (
    CAMPOS_PARCEIRO,
    ENTIDADE_PARCEIRO,
    SERVICO_BOLETO,
    SERVICO_LOAD_RECORDS,
    STATUS_HTTP_SESSAO_EXPIRADA,
)
from .exceptions import (
    SankhyaError,
    SankhyaSessionExpiredError,
    SankhyaTimeoutError,
)
from .models import BuscaParceiros, FiltrosReceitas, PaginaParceiros, Parceiro
from .parsers import extrair_chave_boleto, parse_parceiros, verificar_status

logger = get_logger(__name__)

# Qualquer falha de transporte (timeout, queda de conexao)
SANKHYA_NETWORK_EXCEPTIONS = (
    httpx.TransportError,
)


def _ler_json(response: httpx.Response, origem: str) -> Dict[str, Any]:
    try:
        return response.json()
    except ValueError as e:
        raise SankhyaError(f"Resposta inválida do Sankhya ({origem})") from e


class SankhyaClient:
    """
    Cliente do Sankhya.

    Exemplo de uso:

        async with SankhyaClient() as client:
            dados = await client.listar_receitas(FiltrosReceitas(codigo_parceiro="10"))
            parceiro = await client.buscar_parceiro("10")
            pdf = await client.baixar_boleto("12345")
    """

    def __init__(
        self,
        config: Optional[SankhyaConfig] = None,
        token_cache: Optional[TokenCache] = None,
    ):
        self.config = config or get_config()
        self.token_cache = token_cache or get_token_cache()
        self._client: Optional[httpx.AsyncClient] = None
        self._owns_client = False

    async def __aenter__(self):
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self._client:
            await self._client.aclose()
            self._client = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Obtem cliente HTTP, criando se necessario."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout, connect=10.0)
            )
            self._owns_client = True
        return self._client

    async def obter_token(self) -> str:
        client = await self._get_client()
        return await self.token_cache.obter_token(client, self.config)

    def _verificar_sessao(self, response: httpx.Response) -> None:
        """401/403: descarta o token e interrompe a operacao."""
        if response.status_code in STATUS_HTTP_SESSAO_EXPIRADA:
            self.token_cache.invalidar()
            raise SankhyaSessionExpiredError()

    # ========== RECEITAS ==========

    async def listar_receitas(self, filtros: FiltrosReceitas) -> Dict[str, Any]:
        """
        Busca uma pagina de titulos a receber.

        Returns:
            JSON da API ({"financeiros": [...], "pagination": {...}})

        Raises:
            SankhyaSessionExpiredError: 401/403 (token descartado)
            SankhyaError: Qualquer outro status de erro
            SankhyaTimeoutError: Timeout/conexao
        """
        token = await self.obter_token()
        client = await self._get_client()

        url = httpx.URL(self.config.receitas_url, params=filtros.to_params())
        logger.info("Buscando receitas", url=str(url))

        try:
            response = await client.get(
                url,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
            )
        except SANKHYA_NETWORK_EXCEPTIONS as e:
            logger.error("Timeout ao buscar receitas", erro=str(e))
            raise SankhyaTimeoutError(f"Timeout ao buscar receitas: {e}") from e

        self._verificar_sessao(response)
        if response.status_code >= 400:
            raise SankhyaError(f"Erro ao buscar receitas: {response.status_code}")

        data = _ler_json(response, "receitas")
        logger.debug(
            "Receitas recebidas",
            quantidade=len(data.get("financeiros") or []),
            pagina=filtros.pagina,
        )
        return data

    # ========== GATEWAY ==========

    async def _chamar_servico(self, service_name: str, request_body: Dict[str, Any]) -> Dict[str, Any]:
        """POST em service.sbr; devolve o responseBody ja validado."""
        token = await self.obter_token()
        client = await self._get_client()

        try:
            response = await client.post(
                self.config.service_url(service_name),
                json={"serviceName": service_name, "requestBody": request_body},
                headers={"Authorization": f"Bearer {token}"},
            )
        except SANKHYA_NETWORK_EXCEPTIONS as e:
            logger.error("Timeout no gateway Sankhya", servico=service_name, erro=str(e))
            raise SankhyaTimeoutError(f"Timeout ao chamar {service_name}: {e}") from e

        self._verificar_sessao(response)
        if response.status_code >= 400:
            raise SankhyaError(f"Erro ao chamar {service_name}: {response.status_code}")

        try:
            return verificar_status(_ler_json(response, service_name), service_name)
        except SankhyaSessionExpiredError:
            self.token_cache.invalidar()
            raise

    # ========== PARCEIROS ==========

    @staticmethod
    def _criterio_parceiros(busca: BuscaParceiros) -> Optional[Dict[str, Any]]:
        if busca.search_code:
            return {
                "expression": {"$": "this.CODPARC = ?"},
                "parameter": [{"$": busca.search_code, "type": "I"}],
            }
        if busca.search_name:
            return {
                "expression": {"$": "UPPER(this.NOMEPARC) LIKE UPPER(?)"},
                "parameter": [{"$": f"%{busca.search_name}%", "type": "S"}],
            }
        return None

    async def buscar_parceiros(self, busca: BuscaParceiros) -> PaginaParceiros:
        """Pesquisa parceiros por codigo exato ou parte do nome."""
        data_set: Dict[str, Any] = {
            "rootEntity": ENTIDADE_PARCEIRO,
            "includePresentationFields": "N",
            "offsetPage": str(busca.page - 1),
            "entity": {"fieldset": {"list": ",".join(CAMPOS_PARCEIRO)}},
        }
        criterio = self._criterio_parceiros(busca)
        if criterio:
            data_set["criteria"] = criterio

        response_body = await self._chamar_servico(SERVICO_LOAD_RECORDS, {"dataSet": data_set})
        parceiros, total, has_more = parse_parceiros(response_body)

        if len(parceiros) > busca.page_size:
            parceiros = parceiros[:busca.page_size]
            has_more = True

        return PaginaParceiros(
            parceiros=parceiros,
            page=busca.page,
            page_size=busca.page_size,
            total=total,
            has_more=has_more,
        )

    async def buscar_parceiro(self, codigo: str) -> Optional[Parceiro]:
        """Parceiro pelo codigo (CODPARC) ou None."""
        pagina = await self.buscar_parceiros(BuscaParceiros(search_code=str(codigo), page_size=1))
        return pagina.parceiros[0] if pagina.parceiros else None

    # ========== BOLETO ==========

    async def baixar_boleto(self, nro_titulo: str) -> Optional[bytes]:
        """
        Gera o PDF do boleto de um titulo (NUFIN).

        Returns:
            Bytes do PDF ou None se o Sankhya nao gerar arquivo para o titulo
        """
        response_body = await self._chamar_servico(SERVICO_BOLETO, {
            "configBoleto": {
                "agrupamentoBoleto": "4",
                "ordenacaoParceiro": 1,
                "dupRenegociadas": False,
                "gerarNumeroBoleto": False,
                "tipoReimpressao": "A",
                "boletoRapido": True,
                "titulo": [{"$": str(nro_titulo)}],
            }
        })

        chave = extrair_chave_boleto(response_body)
        if not chave:
            logger.warning("Sankhya nao gerou boleto", nro_titulo=nro_titulo)
            return None

        token = await self.obter_token()
        client = await self._get_client()
        try:
            response = await client.get(
                self.config.visualizador_url,
                params={"chaveArquivo": chave},
                headers={"Authorization": f"Bearer {token}"},
            )
        except SANKHYA_NETWORK_EXCEPTIONS as e:
            logger.error("Timeout ao baixar boleto", nro_titulo=nro_titulo, erro=str(e))
            raise SankhyaTimeoutError(f"Timeout ao baixar boleto: {e}") from e

        self._verificar_sessao(response)
        if response.status_code >= 400:
            raise SankhyaError(f"Erro ao baixar boleto: {response.status_code}")

        logger.info("Boleto gerado", nro_titulo=nro_titulo, tamanho_bytes=len(response.content))
        return response.content


def get_client() -> SankhyaClient:
    """Cliente com configuracao e cache de token globais."""
    return SankhyaClient()
