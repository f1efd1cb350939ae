# utils/__init__.py
"""
Utilitários do Painel de Títulos a Receber (logging, datas).
"""
