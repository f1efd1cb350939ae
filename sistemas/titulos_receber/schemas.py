# sistemas/titulos_receber/schemas.py
"""
Schemas Pydantic das respostas de /api/sankhya.

Os nomes dos campos seguem o contrato JSON consumido pelo front.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


# ==========================================
# Títulos
# ==========================================

class BoletoResponse(BaseModel):
    """Bloco boleto repassado como veio do Sankhya"""
    codigoBarras: Any = None
    nossoNumero: Any = None
    linhaDigitavel: Any = None
    numeroRemessa: Any = None


class TituloResponse(BaseModel):
    """Título a receber já classificado"""
    nroTitulo: str
    parceiro: str
    codParceiro: str
    valor: Any = None
    dataVencimento: str
    dataNegociacao: str
    status: str
    tipoFinanceiro: str
    tipoTitulo: str
    contaBancaria: Optional[str] = None
    historico: Any = None
    numeroParcela: Any = None
    origemFinanceiro: Any = None
    codigoEmpresa: Any = None
    codigoNatureza: Any = None
    boleto: BoletoResponse


class TitulosReceberResponse(BaseModel):
    titulos: List[TituloResponse]
    # Paginação do Sankhya, sem alteração
    pagination: Optional[Dict[str, Any]] = None


# ==========================================
# Parceiros
# ==========================================

class ParceiroResponse(BaseModel):
    CODPARC: str
    NOMEPARC: str = ""
    RAZAOSOCIAL: str = ""
    CGC_CPF: str = ""


class ParceirosPaginationResponse(BaseModel):
    page: str
    pageSize: str
    total: str
    hasMore: str


class ParceirosResponse(BaseModel):
    parceiros: List[ParceiroResponse]
    pagination: ParceirosPaginationResponse


# ==========================================
# Erros
# ==========================================

class ErroResponse(BaseModel):
    """Corpo das respostas de erro do proxy"""
    error: str
    details: Optional[str] = None
