# services/sankhya/parsers.py
"""
Parsers para respostas do gateway do Sankhya (service.sbr, outputType=json).

Formato do loadRecords:

    {
      "status": "1",
      "responseBody": {
        "entities": {
          "total": "2",
          "hasMoreResult": "false",
          "metadata": {"fields": {"field": [{"name": "CODPARC"}, {"name": "NOMEPARC"}]}},
          "entity": [
            {"f0": {"$": "10"}, "f1": {"$": "ACME LTDA"}},
            {"f0": {"$": "11"}, "f1": {}}
          ]
        }
      }
    }

Quando ha um unico registro, "entity" (e "field") vem como objeto, nao lista.
"""

from typing import Any, Dict, List, Optional, Tuple

from utils.logging_config import get_logger
from .constants import GATEWAY_STATUS_OK, GATEWAY_STATUS_SESSAO_EXPIRADA
from .exceptions import SankhyaServiceError, SankhyaSessionExpiredError
from .models import Parceiro

logger = get_logger(__name__)


def _como_lista(valor: Any) -> List[Any]:
    if valor is None:
        return []
    if isinstance(valor, list):
        return valor
    return [valor]


def _valor_campo(campo: Any) -> Optional[str]:
    """Extrai o valor de {"$": "..."}; campos vazios chegam como {}."""
    if isinstance(campo, dict):
        return campo.get("$")
    return campo


def _texto(valor: Any) -> str:
    return "" if valor is None else str(valor).strip()


def verificar_status(payload: Dict[str, Any], service_name: str = "") -> Dict[str, Any]:
    """
    Valida o envelope do gateway e devolve o responseBody.

    Raises:
        SankhyaSessionExpiredError: status "3"
        SankhyaServiceError: qualquer status diferente de "1"
    """
    status = str(payload.get("status", ""))
    if status == GATEWAY_STATUS_OK:
        return payload.get("responseBody") or {}

    mensagem = payload.get("statusMessage") or f"Serviço {service_name} retornou status {status or 'vazio'}"
    if status == GATEWAY_STATUS_SESSAO_EXPIRADA:
        raise SankhyaSessionExpiredError()
    raise SankhyaServiceError(mensagem, service_name=service_name)


def parse_entities(response_body: Optional[Dict[str, Any]]) -> Tuple[List[Dict[str, Optional[str]]], int, bool]:
    """
    Converte o bloco "entities" do loadRecords em linhas {CAMPO: valor}.

    Returns:
        (linhas, total, has_more)
    """
    entities = (response_body or {}).get("entities") or {}
    if not entities:
        return [], 0, False

    campos = [
        f.get("name", "")
        for f in _como_lista(((entities.get("metadata") or {}).get("fields") or {}).get("field"))
    ]

    linhas = []
    for entity in _como_lista(entities.get("entity")):
        linha = {}
        for indice, nome in enumerate(campos):
            linha[nome] = _valor_campo(entity.get(f"f{indice}"))
        linhas.append(linha)

    try:
        total = int(entities.get("total", len(linhas)))
    except (TypeError, ValueError):
        total = len(linhas)

    has_more = str(entities.get("hasMoreResult", "false")).lower() == "true"

    return linhas, total, has_more


def parse_parceiros(response_body: Optional[Dict[str, Any]]) -> Tuple[List[Parceiro], int, bool]:
    """Linhas do loadRecords de Parceiro convertidas em Parceiro."""
    linhas, total, has_more = parse_entities(response_body)
    parceiros = [
        Parceiro(
            codigo=_texto(linha.get("CODPARC")),
            nome=_texto(linha.get("NOMEPARC")),
            razao_social=_texto(linha.get("RAZAOSOCIAL")),
            cgc_cpf=_texto(linha.get("CGC_CPF")),
        )
        for linha in linhas
        if linha.get("CODPARC")
    ]
    return parceiros, total, has_more


def extrair_chave_boleto(response_body: Optional[Dict[str, Any]]) -> Optional[str]:
    """Chave do arquivo gerado pelo BoletoSP (responseBody.boleto.valor)."""
    boleto = (response_body or {}).get("boleto") or {}
    chave = boleto.get("valor")
    if isinstance(chave, dict):
        chave = chave.get("$")
    return chave or None
