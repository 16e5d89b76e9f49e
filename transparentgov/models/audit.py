"""Audit record data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AuditStatus(Enum):
    FAIR = "Fair"
    BIAS_DETECTED = "Bias Detected"
    NEEDS_REVIEW = "Needs Review"


@dataclass(frozen=True)
class BiasDetails:
    """What the audit found, and for whom."""

    demographic: str
    disparity: str
    impact: str


@dataclass(frozen=True)
class XaiFactor:
    """A single decision factor and its relative importance (0..1)."""

    name: str
    importance: float

    def describe(self) -> str:
        return f"{self.name} ({self.importance * 100:.0f}% importance)"


@dataclass(frozen=True)
class AuditRecord:
    """A published audit of one government AI system."""

    id: str
    name: str
    agency: str
    description: str
    status: AuditStatus
    fairness_score: int
    bias_details: BiasDetails
    xai_factors: tuple[XaiFactor, ...] = field(default_factory=tuple)
    blockchain_tx: str = ""
    data_source: str = ""
    algorithm_version: str = ""
    last_audit: str = ""

    @property
    def is_fair(self) -> bool:
        return self.status is AuditStatus.FAIR

    def decision_factors(self) -> str:
        """Render the XAI factors as a comma-separated list."""
        return ", ".join(f.describe() for f in self.xai_factors)

    @classmethod
    def from_dict(cls, data: dict) -> AuditRecord:
        """Build a record from the camelCase mapping used by catalog files."""
        bias = data["biasDetails"]
        xai = data.get("xaiExplanation") or {}
        factors = xai.get("factors", []) if isinstance(xai, dict) else xai
        return cls(
            id=data["id"],
            name=data["name"],
            agency=data["agency"],
            description=data.get("description", ""),
            status=AuditStatus(data["status"]),
            fairness_score=int(data["fairnessScore"]),
            bias_details=BiasDetails(
                demographic=bias["demographic"],
                disparity=bias["disparity"],
                impact=bias["impact"],
            ),
            xai_factors=tuple(
                XaiFactor(name=f["name"], importance=float(f["importance"]))
                for f in factors
            ),
            blockchain_tx=data.get("blockchainTx", ""),
            data_source=data.get("dataSource", ""),
            algorithm_version=data.get("algorithmVersion", ""),
            last_audit=data.get("lastAudit", ""),
        )
