# main.py
"""
Painel de Títulos a Receber - Aplicação FastAPI Principal

- Proxy das receitas do Sankhya (/api/sankhya)
- Página de consulta com download de boleto (/titulos-receber)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

import config
from middleware.request_id import RequestIDMiddleware
from services.sankhya import get_config
from utils.logging_config import SERVICE_NAME, get_logger, setup_logging

from sistemas.titulos_receber.router import router as titulos_receber_router
from sistemas.titulos_receber.router_pages import router as titulos_receber_pages

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle events da aplicação.
    Executa na inicialização e no shutdown.
    """
    setup_logging()
    logger.info("Iniciando Painel de Títulos a Receber", env=config.ENV)

    ok, erros = get_config().validate()
    if not ok:
        logger.warning("Configuração do Sankhya incompleta", erros=erros)

    yield
    logger.info("Encerrando Painel de Títulos a Receber")


app = FastAPI(
    title="Painel de Títulos a Receber",
    description="Consulta de títulos a receber do Sankhya com download de boleto",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


# ==================================================
# ROTAS DO PAINEL
# ==================================================

@app.get("/")
async def root():
    """Redireciona para a consulta de títulos"""
    return RedirectResponse(url="/titulos-receber")


@app.get("/health")
async def health_check():
    """Health check para monitoramento"""
    ok, _ = get_config().validate()
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "sankhya_configurado": ok,
    }


# ==================================================
# ROUTERS
# ==================================================

app.include_router(titulos_receber_router, prefix="/api/sankhya")
app.include_router(titulos_receber_pages)


# ==================================================
# EXECUÇÃO DIRETA
# ==================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=not config.IS_PRODUCTION)
