"""Insight intents, lifecycle keys and lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Intent(Enum):
    SUMMARY = "summary"
    MITIGATION = "mitigation"
    ROOT_CAUSE = "root_cause"
    FAIRNESS_SIMULATION = "fairness_simulation"
    PERSONAL_IMPACT = "personal_impact"
    CITIZEN_QUERY = "citizen_query"
    INQUIRY_DRAFT = "inquiry_draft"
    TREND_ANALYSIS = "trend_analysis"
    COMPARISON = "comparison"
    REMEDIATION_SIMULATION = "remediation_simulation"
    POLICY_RISK = "policy_risk"

    @property
    def requires_user_text(self) -> bool:
        return self in _TEXT_INTENTS


_TEXT_INTENTS = frozenset(
    {Intent.PERSONAL_IMPACT, Intent.CITIZEN_QUERY, Intent.REMEDIATION_SIMULATION}
)


class ScopeKind(Enum):
    RECORD = "record"
    PAIR = "pair"
    ALL = "all"
    NONE = "none"


@dataclass(frozen=True)
class Scope:
    """The record id(s) a generation request applies to."""

    kind: ScopeKind
    record_ids: tuple[str, ...] = ()

    @classmethod
    def record(cls, record_id: str) -> Scope:
        return cls(ScopeKind.RECORD, (record_id,))

    @classmethod
    def pair(cls, first: str, second: str) -> Scope:
        if first == second:
            raise ValueError(f"A comparison needs two distinct records, got {first!r} twice")
        return cls(ScopeKind.PAIR, tuple(sorted((first, second))))

    @classmethod
    def all(cls) -> Scope:
        return cls(ScopeKind.ALL)

    @classmethod
    def none(cls) -> Scope:
        return cls(ScopeKind.NONE)


@dataclass(frozen=True)
class LifecycleKey:
    """Identifies one independently tracked generation slot."""

    intent: Intent
    scope: Scope


class InsightStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class InsightState:
    """Observable state of one lifecycle slot.

    ``text`` is raw model output and must be treated as untrusted.
    """

    status: InsightStatus
    text: str | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, text: str) -> InsightState:
        return cls(InsightStatus.SUCCEEDED, text=text)

    @classmethod
    def failed(cls, message: str) -> InsightState:
        return cls(InsightStatus.FAILED, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status is InsightStatus.LOADING

    @property
    def message(self) -> str:
        """Whatever the presentation layer should show for this slot."""
        return self.text or self.error or ""


IDLE = InsightState(InsightStatus.IDLE)
LOADING = InsightState(InsightStatus.LOADING)
