# sistemas/__init__.py
"""
Sistemas do painel.
"""
