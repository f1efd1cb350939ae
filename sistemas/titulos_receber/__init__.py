# sistemas/titulos_receber/__init__.py
"""
Sistema de Títulos a Receber

Proxy das receitas do Sankhya e página de consulta com download de boleto.
"""
