# middleware/request_id.py
"""
Middleware de Request ID.

Cada requisição recebe um identificador (gerado ou vindo do header
X-Request-ID) que acompanha todos os logs emitidos durante o atendimento,
inclusive as chamadas ao Sankhya.

Uso em outros módulos:
    from middleware.request_id import get_request_id

    request_id = get_request_id()  # ID da requisição atual ou None
"""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

# Tamanho máximo aceito para IDs vindos de fora
MAX_REQUEST_ID_LENGTH = 64

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Retorna o Request ID da requisição atual (None fora de uma requisição)."""
    return _request_id_ctx.get()


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Associa um Request ID a cada requisição.

    - Reaproveita o header X-Request-ID quando enviado (truncado)
    - Disponibiliza em request.state.request_id e via get_request_id()
    - Vincula ao contexto do structlog
    - Devolve no header X-Request-ID da resposta
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        externo = request.headers.get(REQUEST_ID_HEADER)
        request_id = externo[:MAX_REQUEST_ID_LENGTH] if externo else generate_request_id()

        request.state.request_id = request_id
        token = _request_id_ctx.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            _request_id_ctx.reset(token)
