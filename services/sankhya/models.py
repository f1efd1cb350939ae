# services/sankhya/models.py
"""
Modelos de dados da integracao com o Sankhya.

As chaves de to_dict() seguem o formato consumido pelo front (camelCase),
que e o mesmo contrato JSON das rotas /api/sankhya.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from .constants import (
    TipoFinanceiroAPI,
    StatusFinanceiroAPI,
    PAGINACAO_VAZIA,
    PAGE_SIZE_PARCEIROS_PADRAO,
)


@dataclass
class FiltrosReceitas:
    """Filtros aceitos por /v1/financeiros/receitas."""
    pagina: int = 1
    codigo_empresa: str = "1"
    codigo_parceiro: str = ""
    status_financeiro: str = StatusFinanceiroAPI.TODOS.value
    tipo_financeiro: str = TipoFinanceiroAPI.TODOS.value
    data_negociacao_inicio: str = ""
    data_negociacao_final: str = ""

    def to_params(self) -> Dict[str, str]:
        """Query string da API. Filtros opcionais so entram quando preenchidos."""
        params = {
            "pagina": str(self.pagina),
            "codigoEmpresa": self.codigo_empresa,
            "statusFinanceiro": self.status_financeiro,
            "tipoFinanceiro": self.tipo_financeiro,
        }
        if self.codigo_parceiro:
            params["codigoParceiro"] = self.codigo_parceiro
        if self.data_negociacao_inicio:
            params["dataNegociacaoInicio"] = self.data_negociacao_inicio
        if self.data_negociacao_final:
            params["dataNegociacaoFinal"] = self.data_negociacao_final
        return params


@dataclass
class BuscaParceiros:
    """Parametros da busca de parceiros."""
    page: int = 1
    page_size: int = PAGE_SIZE_PARCEIROS_PADRAO
    search_name: str = ""
    search_code: str = ""

    def __post_init__(self):
        self.page = max(1, self.page)
        self.page_size = max(1, self.page_size)
        self.search_name = (self.search_name or "").strip()
        self.search_code = (self.search_code or "").strip()


@dataclass
class Parceiro:
    """Parceiro (cliente) do Sankhya - entidade TGFPAR."""
    codigo: str
    nome: str = ""
    razao_social: str = ""
    cgc_cpf: str = ""

    @property
    def nome_exibicao(self) -> Optional[str]:
        return self.nome or self.razao_social or None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "CODPARC": self.codigo,
            "NOMEPARC": self.nome,
            "RAZAOSOCIAL": self.razao_social,
            "CGC_CPF": self.cgc_cpf,
        }


@dataclass
class PaginaParceiros:
    parceiros: List[Parceiro] = field(default_factory=list)
    page: int = 1
    page_size: int = PAGE_SIZE_PARCEIROS_PADRAO
    total: int = 0
    has_more: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parceiros": [p.to_dict() for p in self.parceiros],
            "pagination": {
                "page": str(self.page),
                "pageSize": str(self.page_size),
                "total": str(self.total),
                "hasMore": "true" if self.has_more else "false",
            },
        }


@dataclass
class Boleto:
    """Dados de boleto associados ao titulo."""
    codigo_barras: Any = None
    nosso_numero: Any = None
    linha_digitavel: Any = None
    numero_remessa: Any = None

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "Boleto":
        data = data or {}
        return cls(
            codigo_barras=data.get("codigoBarras"),
            nosso_numero=data.get("nossoNumero"),
            linha_digitavel=data.get("linhaDigitavel"),
            numero_remessa=data.get("numeroRemessa"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "codigoBarras": self.codigo_barras,
            "nossoNumero": self.nosso_numero,
            "linhaDigitavel": self.linha_digitavel,
            "numeroRemessa": self.numero_remessa,
        }


@dataclass
class Titulo:
    """Titulo a receber ja enriquecido e classificado para exibicao."""
    nro_titulo: str
    parceiro: str
    cod_parceiro: str
    valor: Any
    data_vencimento: str
    data_negociacao: str
    status: str
    tipo_financeiro: str
    tipo_titulo: str
    conta_bancaria: Optional[str] = None
    historico: Any = None
    numero_parcela: Any = None
    origem_financeiro: Any = None
    codigo_empresa: Any = None
    codigo_natureza: Any = None
    boleto: Boleto = field(default_factory=Boleto)

    @property
    def numero_ordenacao(self) -> int:
        try:
            return int(self.nro_titulo)
        except (TypeError, ValueError):
            return 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nroTitulo": self.nro_titulo,
            "parceiro": self.parceiro,
            "codParceiro": self.cod_parceiro,
            "valor": self.valor,
            "dataVencimento": self.data_vencimento,
            "dataNegociacao": self.data_negociacao,
            "status": self.status,
            "tipoFinanceiro": self.tipo_financeiro,
            "tipoTitulo": self.tipo_titulo,
            "contaBancaria": self.conta_bancaria,
            "historico": self.historico,
            "numeroParcela": self.numero_parcela,
            "origemFinanceiro": self.origem_financeiro,
            "codigoEmpresa": self.codigo_empresa,
            "codigoNatureza": self.codigo_natureza,
            "boleto": self.boleto.to_dict(),
        }


@dataclass
class ResultadoTitulos:
    """Resposta de /api/sankhya/titulos-receber."""
    titulos: List[Titulo] = field(default_factory=list)
    pagination: Optional[Dict[str, Any]] = None

    @property
    def paginacao_exibicao(self) -> Dict[str, Any]:
        """Paginacao com os padroes do painel quando a API nao envia."""
        return self.pagination or dict(PAGINACAO_VAZIA)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "titulos": [t.to_dict() for t in self.titulos],
            "pagination": self.pagination,
        }
