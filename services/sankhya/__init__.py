# services/sankhya/__init__.py
"""
Integracao com o ERP Sankhya.

- Login e cache do bearer token
- Receitas (titulos a receber) via /v1/financeiros/receitas
- Parceiros e boletos via gateway (service.sbr)

Uso:
    from services.sankhya import SankhyaClient, FiltrosReceitas

    async with SankhyaClient() as client:
        dados = await client.listar_receitas(FiltrosReceitas(pagina=1))
"""

from .config import SankhyaConfig, get_config, reload_config
from .auth import TokenCache, get_token_cache
from .client import SankhyaClient, get_client
from .exceptions import (
    SankhyaError,
    SankhyaAuthError,
    SankhyaSessionExpiredError,
    SankhyaServiceError,
    SankhyaTimeoutError,
)
from .models import (
    FiltrosReceitas,
    BuscaParceiros,
    Parceiro,
    PaginaParceiros,
    Boleto,
    Titulo,
    ResultadoTitulos,
)

__all__ = [
    # Config
    "SankhyaConfig",
    "get_config",
    "reload_config",
    # Auth
    "TokenCache",
    "get_token_cache",
    # Client
    "SankhyaClient",
    "get_client",
    # Exceptions
    "SankhyaError",
    "SankhyaAuthError",
    "SankhyaSessionExpiredError",
    "SankhyaServiceError",
    "SankhyaTimeoutError",
    # Models
    "FiltrosReceitas",
    "BuscaParceiros",
    "Parceiro",
    "PaginaParceiros",
    "Boleto",
    "Titulo",
    "ResultadoTitulos",
]
