"""
Configuração global de testes pytest
"""
import sys
import os

# Raiz do projeto no PYTHONPATH antes da coleta dos testes
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

# Variáveis de ambiente para testes (sem credenciais reais do Sankhya)
os.environ.setdefault("ENV", "test")
os.environ.setdefault("SANKHYA_BASE_URL", "https://sankhya.test")
