"""Trend and comparison aggregator — multi-record insights."""

from __future__ import annotations

import asyncio
import logging

from transparentgov.models.catalog import Catalog
from transparentgov.models.insight import IDLE, InsightState, Intent, LifecycleKey, Scope
from transparentgov.orchestrator.lifecycle import RequestLifecycleManager
from transparentgov.orchestrator.selection import SelectionManager

logger = logging.getLogger(__name__)

TREND_KEY = LifecycleKey(Intent.TREND_ANALYSIS, Scope.all())


class InsightAggregator:
    """Runs cross-record trend analysis and pairwise comparisons.

    Each kind has a single live slot: the trend slot is fixed, and the
    comparison slot follows the most recently started pair.
    """

    def __init__(self, catalog: Catalog, lifecycle: RequestLifecycleManager) -> None:
        self.catalog = catalog
        self.lifecycle = lifecycle
        self._comparison_key: LifecycleKey | None = None

    def run_trend_analysis(self) -> asyncio.Task | None:
        flagged = self.catalog.flagged()
        logger.info("Running trend analysis over %d flagged audits", len(flagged))
        return self.lifecycle.trigger(Intent.TREND_ANALYSIS, Scope.all())

    def run_comparison(self, selection: SelectionManager) -> asyncio.Task | None:
        """Compare the two selected records.

        Returns ``None`` without sending anything unless exactly two records
        are selected.
        """
        if selection.size() != 2:
            logger.debug("Comparison needs 2 selections, have %d", selection.size())
            return None

        first, second = selection.ids()
        # Unknown ids can only come from a bug, so let the lookup raise.
        self.catalog.get(first)
        self.catalog.get(second)

        scope = Scope.pair(first, second)
        self._comparison_key = LifecycleKey(Intent.COMPARISON, scope)
        return self.lifecycle.trigger(Intent.COMPARISON, scope)

    def trend_state(self) -> InsightState:
        return self.lifecycle.state(TREND_KEY)

    def comparison_state(self) -> InsightState:
        if self._comparison_key is None:
            return IDLE
        return self.lifecycle.state(self._comparison_key)

    @property
    def comparison_key(self) -> LifecycleKey | None:
        return self._comparison_key
