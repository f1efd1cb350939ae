#!/usr/bin/env python
"""
Executa os testes com o PYTHONPATH configurado.

Uso:
    python run_tests.py [argumentos do pytest]

Exemplos:
    python run_tests.py tests/services/test_sankhya_service.py -v
    python run_tests.py tests/ -v --tb=short
"""

import sys
import os

project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

os.environ.setdefault("ENV", "test")
os.environ.setdefault("SANKHYA_BASE_URL", "https://sankhya.test")

if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main(sys.argv[1:] if len(sys.argv) > 1 else ["-v", "tests/"]))
