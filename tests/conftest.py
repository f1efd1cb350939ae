# tests/conftest.py
"""
Configuração global do pytest para o Painel de Títulos a Receber.

Fornece um Sankhya falso (httpx.MockTransport) que responde login, receitas,
loadRecords de Parceiro e geração de boleto.
"""

import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

# Adiciona o diretório raiz do projeto ao PYTHONPATH
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

os.environ.setdefault("ENV", "test")

import httpx
import pytest

from services.sankhya.auth import TokenCache
from services.sankhya.client import SankhyaClient
from services.sankhya.config import SankhyaConfig


BASE_URL = "https://sankhya.test"

PDF_FALSO = b"%PDF-1.4 boleto de teste"


def receita(
    codigo_financeiro: int,
    codigo_parceiro: int,
    vencimento: str = "2099-12-31 00:00:00",
    provisao: Any = "N",
    nosso_numero: Optional[str] = None,
    **extras,
) -> Dict[str, Any]:
    """Registro no formato de /v1/financeiros/receitas."""
    item = {
        "codigoFinanceiro": codigo_financeiro,
        "codigoParceiro": codigo_parceiro,
        "valorParcela": 150.5,
        "dataVencimento": vencimento,
        "dataNegociacao": "2024-01-10 00:00:00",
        "provisao": provisao,
        "codigoContaBancaria": None,
        "observacao": None,
        "numeroParcela": 1,
        "origemFinanceiro": "E",
        "codigoEmpresa": 1,
        "codigoNatureza": 1010000,
        "boleto": {
            "codigoBarras": None,
            "nossoNumero": nosso_numero,
            "linhaDigitavel": None,
            "numeroRemessa": None,
        },
    }
    item.update(extras)
    return item


def entidades_parceiros(parceiros: List[Dict[str, str]], has_more: bool = False) -> Dict[str, Any]:
    """responseBody de um loadRecords de Parceiro."""
    campos = ["CODPARC", "NOMEPARC", "RAZAOSOCIAL", "CGC_CPF"]
    entity = [
        {f"f{i}": ({"$": p[c]} if p.get(c) else {}) for i, c in enumerate(campos)}
        for p in parceiros
    ]
    return {
        "entities": {
            "total": str(len(parceiros)),
            "hasMoreResult": "true" if has_more else "false",
            "offsetPage": "0",
            "metadata": {"fields": {"field": [{"name": c} for c in campos]}},
            "entity": entity[0] if len(entity) == 1 else entity,
        }
    }


class FakeSankhya:
    """
    Sankhya em memória.

    Atributos ajustáveis pelos testes:
    - receitas / pagination: resposta de /v1/financeiros/receitas
    - parceiros: {codigo: {"NOMEPARC": ..., "RAZAOSOCIAL": ..., "CGC_CPF": ...}}
    - status_receitas / status_login: código HTTP forçado
    - parceiros_com_erro: códigos cuja consulta retorna status "0"
    - chave_boleto: chave devolvida pelo BoletoSP (None = sem boleto)
    """

    def __init__(self):
        self.receitas: List[Dict[str, Any]] = []
        self.pagination: Optional[Dict[str, Any]] = {
            "page": "1", "offset": "0", "total": "0", "hasMore": "false",
        }
        self.parceiros: Dict[str, Dict[str, str]] = {}
        self.parceiros_com_erro: set = set()
        self.status_login = 200
        self.login_body: Dict[str, Any] = {"bearerToken": "token-teste"}
        self.status_receitas = 200
        self.chave_boleto: Optional[str] = "chave-boleto-1"
        self.requests: List[httpx.Request] = []

    # ---------- consultas dos testes ----------

    def chamadas(self, path: str, metodo: Optional[str] = None) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if r.url.path == path and (metodo is None or r.method == metodo)
        ]

    @property
    def logins(self) -> int:
        return len(self.chamadas("/login"))

    def servicos_chamados(self) -> List[str]:
        return [
            r.url.params.get("serviceName")
            for r in self.chamadas("/gateway/v1/mge/service.sbr")
        ]

    # ---------- transporte ----------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/login":
            if self.status_login >= 400:
                return httpx.Response(self.status_login, json={"error": "unauthorized"})
            return httpx.Response(200, json=self.login_body)

        if path == "/v1/financeiros/receitas":
            if self.status_receitas >= 400:
                return httpx.Response(self.status_receitas, json={"error": "x"})
            return httpx.Response(200, json={
                "financeiros": self.receitas,
                "pagination": self.pagination,
            })

        if path == "/gateway/v1/mge/service.sbr":
            return self._servico(request)

        if path == "/gateway/v1/mge/visualizadorArquivos.mge":
            return httpx.Response(200, content=PDF_FALSO, headers={"Content-Type": "application/pdf"})

        return httpx.Response(404)

    def _servico(self, request: httpx.Request) -> httpx.Response:
        corpo = json.loads(request.content or b"{}")
        servico = corpo.get("serviceName")

        if servico == "CRUDServiceProvider.loadRecords":
            data_set = corpo["requestBody"]["dataSet"]
            criterio = data_set.get("criteria")
            encontrados = []
            if criterio and "CODPARC" in criterio["expression"]["$"]:
                codigo = criterio["parameter"][0]["$"]
                if codigo in self.parceiros_com_erro:
                    return httpx.Response(200, json={"status": "0", "statusMessage": "Falha no parceiro"})
                if codigo in self.parceiros:
                    encontrados = [dict(CODPARC=codigo, **self.parceiros[codigo])]
            elif criterio:
                termo = criterio["parameter"][0]["$"].strip("%").upper()
                encontrados = [
                    dict(CODPARC=c, **p) for c, p in self.parceiros.items()
                    if termo in p.get("NOMEPARC", "").upper()
                ]
            else:
                encontrados = [dict(CODPARC=c, **p) for c, p in self.parceiros.items()]
            return httpx.Response(200, json={"status": "1", "responseBody": entidades_parceiros(encontrados)})

        if servico == "BoletoSP.buildPreVisualizacao":
            body = {"boleto": {"valor": self.chave_boleto}} if self.chave_boleto else {}
            return httpx.Response(200, json={"status": "1", "responseBody": body})

        return httpx.Response(200, json={"status": "0", "statusMessage": f"Serviço {servico} desconhecido"})


@pytest.fixture
def sankhya_config():
    """Configuração de teste."""
    return SankhyaConfig(
        base_url=BASE_URL,
        token="tok-integracao",
        appkey="app-key",
        username="usuario@empresa.com",
        password="senha",
        timeout=5.0,
    )


@pytest.fixture
def fake_sankhya():
    return FakeSankhya()


@pytest.fixture
def make_client(sankhya_config, fake_sankhya) -> Callable[..., SankhyaClient]:
    """
    Fábrica de SankhyaClient ligado ao FakeSankhya.

    Cada cliente recebe um TokenCache próprio, a menos que um seja informado.
    """
    def _make(token_cache: Optional[TokenCache] = None, handler=None) -> SankhyaClient:
        client = SankhyaClient(config=sankhya_config, token_cache=token_cache or TokenCache())
        client._client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler or fake_sankhya.handler),
            timeout=sankhya_config.timeout,
        )
        client._owns_client = True
        return client

    return _make
