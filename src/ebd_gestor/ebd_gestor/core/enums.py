from __future__ import annotations

from enum import Enum


class Granularity(str, Enum):
    """Tamanho da janela de tempo usada nos filtros do painel e relatórios."""

    DAY = "day"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class FrequencyBand(str, Enum):
    """Faixa de frequência usada para colorir percentuais."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StudentStatus(str, Enum):
    """Aba do cadastro: ativos ou baixa frequência (inativos)."""

    ACTIVE = "active"
    INACTIVE = "inactive"
