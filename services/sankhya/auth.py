# services/sankhya/auth.py
"""
Login no Sankhya e cache do bearer token.

O token e obtido uma unica vez e reaproveitado por todas as requisicoes do
processo ate ser invalidado (falha no login ou 401/403 em uma chamada).
"""

from typing import Optional

import httpx

from utils.logging_config import get_logger
from .config import SankhyaConfig
from .exceptions import SankhyaAuthError, SankhyaError, SankhyaTimeoutError

logger = get_logger(__name__)


class TokenCache:
    """Guarda no maximo um bearer token por processo."""

    def __init__(self):
        self._token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    def invalidar(self) -> None:
        if self._token:
            logger.info("Token Sankhya invalidado")
        self._token = None

    async def obter_token(self, http: httpx.AsyncClient, config: SankhyaConfig) -> str:
        """
        Retorna o token em cache ou faz login.

        Raises:
            SankhyaAuthError: Login recusado ou token ausente na resposta
            SankhyaTimeoutError: Timeout/conexao no login
        """
        if self._token:
            return self._token

        try:
            response = await http.post(
                config.login_url,
                headers=config.login_headers,
                content="{}",
            )

            if response.status_code >= 400:
                raise SankhyaAuthError("Erro ao autenticar no Sankhya")

            data = response.json()
            token = data.get("bearerToken") or data.get("token")
            if not token:
                raise SankhyaAuthError("Token não encontrado na resposta")

            self._token = token
            logger.info("Login Sankhya realizado")
            return token

        except httpx.TransportError as e:
            logger.error("Timeout no login Sankhya", erro=str(e))
            self._token = None
            raise SankhyaTimeoutError(f"Timeout ao autenticar no Sankhya: {e}") from e

        except SankhyaError as e:
            logger.error("Erro no login Sankhya", erro=str(e))
            self._token = None
            raise

        except ValueError as e:
            # Corpo nao-JSON
            logger.error("Resposta de login invalida", erro=str(e))
            self._token = None
            raise SankhyaAuthError("Erro ao autenticar no Sankhya") from e


# Instancia global (singleton)
_token_cache: Optional[TokenCache] = None


def get_token_cache() -> TokenCache:
    """Cache de token compartilhado pelo processo."""
    global _token_cache
    if _token_cache is None:
        _token_cache = TokenCache()
    return _token_cache
