from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import DEFAULT_PODIUM_SIZE, DEFAULT_RANKING_LIMIT, LOW_FREQUENCY_THRESHOLD


@dataclass(frozen=True)
class Leadership:
    pastor_presidente: str = ""
    dirigentes: str = ""
    superintendentes: str = ""
    secretarios: str = ""
    tesoureiro: str = ""


@dataclass(frozen=True)
class ChurchSettings:
    """Church identity printed on report headers.

    Passed explicitly to report builders; nothing reads it from global state.
    """

    church_name: str = ""
    address: str = ""
    logo_url: Optional[str] = None
    leadership: Leadership = field(default_factory=Leadership)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ChurchSettings":
        data = data or {}
        lead = data.get("leadership") or {}
        return cls(
            church_name=str(data.get("churchName") or ""),
            address=str(data.get("address") or ""),
            logo_url=data.get("logoUrl") or None,
            leadership=Leadership(
                pastor_presidente=str(lead.get("pastorPresidente") or ""),
                dirigentes=str(lead.get("dirigentes") or ""),
                superintendentes=str(lead.get("superintendentes") or ""),
                secretarios=str(lead.get("secretarios") or ""),
                tesoureiro=str(lead.get("tesoureiro") or ""),
            ),
        )


@dataclass(frozen=True)
class EngineSettings:
    """Policy knobs for the reporting engine."""

    low_frequency_threshold: int = LOW_FREQUENCY_THRESHOLD
    ranking_limit: int = DEFAULT_RANKING_LIMIT
    podium_size: int = DEFAULT_PODIUM_SIZE
