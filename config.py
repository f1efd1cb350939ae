# config.py
# -*- coding: utf-8 -*-
"""
Configurações centralizadas do Painel de Títulos a Receber
"""

import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente (apenas se existir .env)
load_dotenv()

# ==================================================
# AMBIENTE
# ==================================================
ENV = os.getenv("ENV", "development")
IS_PRODUCTION = ENV == "production"

# ==================================================
# CONFIGURAÇÕES DO SANKHYA (ERP)
# ==================================================
SANKHYA_BASE_URL = os.getenv("SANKHYA_BASE_URL", "https://api.sandbox.sankhya.com.br").rstrip("/")
# ATENÇÃO: Credenciais DEVEM ser definidas via variáveis de ambiente
SANKHYA_TOKEN = os.getenv("SANKHYA_TOKEN", "")
SANKHYA_APPKEY = os.getenv("SANKHYA_APPKEY", "")
SANKHYA_USERNAME = os.getenv("SANKHYA_USERNAME", "")
SANKHYA_PASSWORD = os.getenv("SANKHYA_PASSWORD", "")
SANKHYA_HTTP_TIMEOUT = float(os.getenv("SANKHYA_HTTP_TIMEOUT", "30"))

# Empresa usada pelo painel quando nenhuma é informada
CODIGO_EMPRESA_PADRAO = os.getenv("CODIGO_EMPRESA_PADRAO", "1")

# ==================================================
# EXIBIÇÃO
# ==================================================
TIMEZONE_LOCAL_NAME = os.getenv("TIMEZONE_LOCAL", "America/Sao_Paulo")

# ==================================================
# HTTP
# ==================================================
CORS_ORIGINS = [
    origem.strip()
    for origem in os.getenv("CORS_ORIGINS", "*").split(",")
    if origem.strip()
]
