# services/__init__.py
"""
Serviços compartilhados do Painel de Títulos a Receber
"""
