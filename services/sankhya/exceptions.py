# services/sankhya/exceptions.py
"""
Exceções da integração com o Sankhya
"""


class SankhyaError(Exception):
    """Erro genérico de comunicação com o Sankhya."""
    pass


class SankhyaAuthError(SankhyaError):
    """Falha no login ou token ausente na resposta."""
    pass


class SankhyaSessionExpiredError(SankhyaError):
    """Token recusado (401/403). O token em cache já foi descartado."""

    def __init__(self, message: str = "Sessão expirada"):
        super().__init__(message)


class SankhyaServiceError(SankhyaError):
    """
    Serviço do gateway respondeu com status de erro.

    Guarda o nome do serviço para facilitar o diagnóstico nos logs.
    """

    def __init__(self, message: str, service_name: str = ""):
        self.service_name = service_name
        super().__init__(message)


class SankhyaTimeoutError(SankhyaError):
    """Timeout ou falha de conexão com o Sankhya."""
    pass
