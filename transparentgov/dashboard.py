"""TransparentGov dashboard — wires catalog, backend and insight state together.

User-interaction handlers call into a ``Dashboard`` and read insight states
back from it; rendering, navigation and clipboard live outside this package.
"""

from __future__ import annotations

import asyncio
import logging

from transparentgov.backends.base import GenerationBackend
from transparentgov.backends.gemini import GeminiBackend
from transparentgov.config import Settings, settings as default_settings
from transparentgov.models.audit import AuditRecord
from transparentgov.models.catalog import Catalog
from transparentgov.models.insight import InsightState, Intent, LifecycleKey, Scope
from transparentgov.models.sample_data import sample_catalog
from transparentgov.orchestrator.aggregator import InsightAggregator
from transparentgov.orchestrator.lifecycle import RequestLifecycleManager
from transparentgov.orchestrator.prompts import PolicyProposal, policy_risk_prompt
from transparentgov.orchestrator.selection import SelectionManager

logger = logging.getLogger(__name__)

POLICY_KEY = LifecycleKey(Intent.POLICY_RISK, Scope.none())

# Intents that are generated for one record at a time from the detail view.
RECORD_INTENTS = frozenset(
    {
        Intent.SUMMARY,
        Intent.MITIGATION,
        Intent.ROOT_CAUSE,
        Intent.FAIRNESS_SIMULATION,
        Intent.PERSONAL_IMPACT,
        Intent.CITIZEN_QUERY,
        Intent.INQUIRY_DRAFT,
        Intent.REMEDIATION_SIMULATION,
    }
)


class Dashboard:
    """Insight orchestration behind the public audit dashboard."""

    def __init__(
        self,
        catalog: Catalog,
        backend: GenerationBackend,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or default_settings
        self.catalog = catalog
        self.backend = backend
        self.lifecycle = RequestLifecycleManager(
            catalog, backend, discard_stale_results=settings.discard_stale_results
        )
        self.selection = SelectionManager()
        self.aggregator = InsightAggregator(catalog, self.lifecycle)
        self.compare_mode = False

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, catalog: Catalog | None = None
    ) -> Dashboard:
        """Build a dashboard talking to Gemini as configured."""
        settings = settings or default_settings
        backend = GeminiBackend(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.request_timeout,
        )
        if not settings.gemini_api_key:
            logger.warning("No Gemini API key configured; insights will report an error")
        return cls(catalog or sample_catalog(), backend, settings)

    # -- Per-record insights --

    def generate(
        self, intent: Intent, record_id: str, user_text: str | None = None
    ) -> asyncio.Task | None:
        if intent not in RECORD_INTENTS:
            raise ValueError(f"{intent.value} is not a per-record insight")
        return self.lifecycle.trigger(intent, Scope.record(record_id), user_text)

    def insight(self, intent: Intent, record_id: str) -> InsightState:
        return self.lifecycle.read(intent, Scope.record(record_id))

    # -- Remediation simulator --

    def remediation_candidates(self) -> list[AuditRecord]:
        return self.catalog.biased()

    def simulate_remediation(self, record_id: str, strategy: str) -> asyncio.Task | None:
        return self.generate(Intent.REMEDIATION_SIMULATION, record_id, strategy)

    # -- Policy sandbox --

    def run_policy_sandbox(self, proposal: PolicyProposal) -> asyncio.Task | None:
        if not proposal.is_complete():
            logger.debug("Ignoring incomplete policy proposal")
            return None
        return self.lifecycle.submit(POLICY_KEY, policy_risk_prompt(proposal))

    def policy_state(self) -> InsightState:
        return self.lifecycle.state(POLICY_KEY)

    # -- Trend analysis --

    def run_trend_analysis(self) -> asyncio.Task | None:
        return self.aggregator.run_trend_analysis()

    def trend_state(self) -> InsightState:
        return self.aggregator.trend_state()

    # -- Comparison --

    def toggle_compare_mode(self) -> bool:
        self.compare_mode = not self.compare_mode
        self.selection.reset()
        logger.debug("Compare mode %s", "on" if self.compare_mode else "off")
        return self.compare_mode

    def select_for_compare(self, record_id: str) -> bool:
        """Toggle ``record_id`` in the comparison selection.

        Outside compare mode selecting does nothing.
        """
        if not self.compare_mode:
            return False
        return self.selection.toggle(record_id)

    @property
    def can_run_comparison(self) -> bool:
        return self.selection.size() == 2

    def run_comparison(self) -> asyncio.Task | None:
        return self.aggregator.run_comparison(self.selection)

    def comparison_state(self) -> InsightState:
        return self.aggregator.comparison_state()

    # -- Shutdown --

    async def aclose(self) -> None:
        """Let in-flight requests settle before the loop goes away."""
        pending = len(self.lifecycle.pending())
        if pending:
            logger.info("Waiting for %d in-flight insights", pending)
        await self.lifecycle.wait_idle()
