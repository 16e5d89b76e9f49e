# ruff: noqa: S101
"""End-to-end tests through the dashboard facade."""

from __future__ import annotations

import pytest

from transparentgov.backends.gemini import GeminiBackend
from transparentgov.config import Settings
from transparentgov.dashboard import Dashboard
from transparentgov.models.catalog import Catalog
from transparentgov.models.insight import IDLE, InsightStatus, Intent
from transparentgov.orchestrator.prompts import PolicyProposal


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.asyncio
async def test_summary_for_fair_record(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    await dashboard.generate(Intent.SUMMARY, "loan-approval-002")

    assert "No significant bias detected" in stub_backend.prompts[0]
    assert dashboard.insight(Intent.SUMMARY, "loan-approval-002").text == "generated text"
    assert dashboard.insight(Intent.SUMMARY, "welfare-dist-001") is IDLE


@pytest.mark.asyncio
async def test_citizen_query_gate(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    assert dashboard.generate(Intent.CITIZEN_QUERY, "welfare-dist-001", "  ") is None
    await dashboard.generate(Intent.CITIZEN_QUERY, "welfare-dist-001", "Am I affected?")

    assert len(stub_backend.prompts) == 1
    assert '"Am I affected?"' in stub_backend.prompts[0]


@pytest.mark.asyncio
async def test_multi_record_intents_are_not_per_record(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    with pytest.raises(ValueError):
        dashboard.generate(Intent.TREND_ANALYSIS, "welfare-dist-001")


@pytest.mark.asyncio
async def test_compare_mode_workflow(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    assert dashboard.select_for_compare("welfare-dist-001") is False
    assert dashboard.selection.size() == 0

    assert dashboard.toggle_compare_mode() is True
    dashboard.select_for_compare("welfare-dist-001")
    assert not dashboard.can_run_comparison
    assert dashboard.run_comparison() is None

    dashboard.select_for_compare("resource-alloc-003")
    dashboard.select_for_compare("loan-approval-002")
    assert dashboard.selection.ids() == ("welfare-dist-001", "resource-alloc-003")
    assert dashboard.can_run_comparison

    await dashboard.run_comparison()
    assert dashboard.comparison_state().text == "generated text"

    assert dashboard.toggle_compare_mode() is False
    assert dashboard.selection.size() == 0


@pytest.mark.asyncio
async def test_entering_compare_mode_resets_selection(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())
    dashboard.toggle_compare_mode()
    dashboard.select_for_compare("welfare-dist-001")
    dashboard.toggle_compare_mode()

    dashboard.toggle_compare_mode()

    assert dashboard.compare_mode is True
    assert dashboard.selection.size() == 0


@pytest.mark.asyncio
async def test_trend_analysis_through_dashboard(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    await dashboard.run_trend_analysis()

    assert dashboard.trend_state().text == "generated text"


@pytest.mark.asyncio
async def test_remediation_simulator(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    candidates = [r.id for r in dashboard.remediation_candidates()]
    assert candidates == ["welfare-dist-001", "resource-alloc-003"]

    assert dashboard.simulate_remediation("welfare-dist-001", "") is None
    await dashboard.simulate_remediation("welfare-dist-001", "Drop location as a feature")

    state = dashboard.insight(Intent.REMEDIATION_SIMULATION, "welfare-dist-001")
    assert state.status is InsightStatus.SUCCEEDED
    assert '"Drop location as a feature"' in stub_backend.prompts[0]


@pytest.mark.asyncio
async def test_policy_sandbox(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())

    assert dashboard.run_policy_sandbox(PolicyProposal("Relief", "", "Farmers")) is None
    assert dashboard.policy_state() is IDLE

    await dashboard.run_policy_sandbox(
        PolicyProposal("Relief", "Land size, district", "Farmers")
    )

    assert dashboard.policy_state().text == "generated text"
    assert "Pre-emptive Bias and Risk Report" in stub_backend.prompts[0]


@pytest.mark.asyncio
async def test_stale_discard_setting_is_applied(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings(discard_stale_results=True))

    assert dashboard.lifecycle.discard_stale_results is True


@pytest.mark.asyncio
async def test_missing_api_key_reports_error_without_crashing(catalog: Catalog) -> None:
    dashboard = Dashboard.from_settings(_settings(gemini_api_key=""), catalog)
    assert isinstance(dashboard.backend, GeminiBackend)

    dashboard.generate(Intent.SUMMARY, "welfare-dist-001")
    await dashboard.aclose()

    state = dashboard.insight(Intent.SUMMARY, "welfare-dist-001")
    assert state.status is InsightStatus.FAILED
    assert state.error.startswith("Error: API key is missing")


def test_default_settings_impose_no_timeout(catalog: Catalog) -> None:
    dashboard = Dashboard.from_settings(_settings(gemini_api_key="k"), catalog)

    assert dashboard.backend.timeout is None


def test_explicit_timeout_is_passed_through(catalog: Catalog) -> None:
    dashboard = Dashboard.from_settings(
        _settings(gemini_api_key="k", request_timeout=12.5), catalog
    )

    assert dashboard.backend.timeout == 12.5


@pytest.mark.asyncio
async def test_full_selection_can_always_be_compared(catalog: Catalog, stub_backend) -> None:
    dashboard = Dashboard(catalog, stub_backend, _settings())
    dashboard.toggle_compare_mode()
    for record_id in catalog.ids():
        dashboard.select_for_compare(record_id)

    assert dashboard.selection.is_full()
    assert dashboard.selection.size() == 2
    assert dashboard.can_run_comparison
    assert dashboard.run_comparison() is not None
    await dashboard.aclose()
