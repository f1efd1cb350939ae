"""
Setup script para instalação do Painel de Títulos a Receber.

Instalação em modo editable para desenvolvimento:
    pip install -e ".[test]"

Isso permite imports como:
    from services.sankhya import SankhyaClient
"""

from setuptools import setup, find_packages

setup(
    name="painel-receber",
    version="1.0.0",
    description="Painel de Títulos a Receber - proxy e consulta do Sankhya",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    package_data={"sistemas.titulos_receber": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "starlette<1.0",
        "uvicorn[standard]>=0.27",
        "httpx>=0.27",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "structlog>=24.1",
        "pytz>=2024.1",
        "jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
)
