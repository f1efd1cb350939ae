# services/sankhya/config.py
"""
Configuracao centralizada para comunicacao com o Sankhya.

Os valores padrao vem de config.py (variaveis de ambiente / .env).
"""

from dataclasses import dataclass
from typing import Dict, Optional

import config as app_config
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SankhyaConfig:
    """Configuracao de acesso a API do Sankhya."""

    base_url: str = "https://api.sandbox.sankhya.com.br"

    # Credenciais enviadas como headers no /login
    token: str = ""
    appkey: str = ""
    username: str = ""
    password: str = ""

    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "SankhyaConfig":
        """Carrega configuracao a partir de config.py."""
        config = cls(
            base_url=app_config.SANKHYA_BASE_URL,
            token=app_config.SANKHYA_TOKEN,
            appkey=app_config.SANKHYA_APPKEY,
            username=app_config.SANKHYA_USERNAME,
            password=app_config.SANKHYA_PASSWORD,
            timeout=app_config.SANKHYA_HTTP_TIMEOUT,
        )

        # Log de configuracao (sem segredos)
        logger.info(
            "SankhyaConfig carregado",
            base_url=config.base_url,
            token=bool(config.token),
            appkey=bool(config.appkey),
            username=bool(config.username),
        )
        return config

    @property
    def login_url(self) -> str:
        return f"{self.base_url}/login"

    @property
    def receitas_url(self) -> str:
        return f"{self.base_url}/v1/financeiros/receitas"

    @property
    def visualizador_url(self) -> str:
        return f"{self.base_url}/gateway/v1/mge/visualizadorArquivos.mge"

    def service_url(self, service_name: str) -> str:
        """URL do gateway para um servico (ex: CRUDServiceProvider.loadRecords)."""
        return f"{self.base_url}/gateway/v1/mge/service.sbr?serviceName={service_name}&outputType=json"

    @property
    def login_headers(self) -> Dict[str, str]:
        return {
            "token": self.token,
            "appkey": self.appkey,
            "username": self.username,
            "password": self.password,
        }

    def validate(self) -> tuple[bool, list[str]]:
        """Valida se a configuracao esta completa."""
        errors = []

        if not self.base_url:
            errors.append("URL do Sankhya (SANKHYA_BASE_URL) nao configurada")
        if not self.token:
            errors.append("Token de integracao (SANKHYA_TOKEN) nao configurado")
        if not self.appkey:
            errors.append("Chave de aplicacao (SANKHYA_APPKEY) nao configurada")
        if not self.username or not self.password:
            errors.append("Usuario/senha (SANKHYA_USERNAME/SANKHYA_PASSWORD) nao configurados")

        return len(errors) == 0, errors


# Instancia global (singleton)
_config: Optional[SankhyaConfig] = None


def get_config() -> SankhyaConfig:
    """Obtem configuracao global (singleton)."""
    global _config
    if _config is None:
        _config = SankhyaConfig.from_env()
    return _config


def reload_config() -> SankhyaConfig:
    """Recarrega configuracao das variaveis de ambiente."""
    global _config
    _config = SankhyaConfig.from_env()
    return _config
