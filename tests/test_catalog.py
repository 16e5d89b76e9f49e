# ruff: noqa: S101
"""Tests for audit records and the read-only catalog."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from transparentgov.models.audit import AuditStatus
from transparentgov.models.catalog import Catalog, UnknownRecordError
from transparentgov.models.insight import Scope, ScopeKind
from transparentgov.models.sample_data import SAMPLE_AUDITS


def test_sample_catalog_is_ordered(catalog: Catalog) -> None:
    assert catalog.ids() == ["welfare-dist-001", "loan-approval-002", "resource-alloc-003"]
    assert len(catalog) == 3
    assert "loan-approval-002" in catalog


def test_record_fields_are_parsed(catalog: Catalog) -> None:
    record = catalog.get("welfare-dist-001")

    assert record.status is AuditStatus.BIAS_DETECTED
    assert record.fairness_score == 72
    assert record.bias_details.demographic == "Geographic Location"
    assert [f.name for f in record.xai_factors][:2] == ["Income Level", "Household Size"]
    assert record.algorithm_version == "WelfareNet-v1.4"


def test_records_are_immutable(catalog: Catalog) -> None:
    record = catalog.get("welfare-dist-001")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.fairness_score = 100  # type: ignore[misc]


def test_flagged_and_biased_subsets() -> None:
    items = [dict(item) for item in SAMPLE_AUDITS]
    items[2]["status"] = "Needs Review"
    catalog = Catalog.from_dicts(items)

    assert [r.id for r in catalog.flagged()] == ["welfare-dist-001", "resource-alloc-003"]
    assert [r.id for r in catalog.biased()] == ["welfare-dist-001"]


def test_unknown_id_raises(catalog: Catalog) -> None:
    with pytest.raises(UnknownRecordError):
        catalog.get("nope")


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        Catalog.from_dicts([SAMPLE_AUDITS[0], SAMPLE_AUDITS[0]])


def test_from_json(tmp_path: Path) -> None:
    path = tmp_path / "audits.json"
    path.write_text(json.dumps(list(SAMPLE_AUDITS)), encoding="utf-8")

    catalog = Catalog.from_json(path)

    assert catalog.get("resource-alloc-003").agency == "Urban Development Authority"


def test_pair_scope_is_order_independent() -> None:
    assert Scope.pair("b", "a") == Scope.pair("a", "b")
    assert Scope.pair("b", "a").kind is ScopeKind.PAIR
    with pytest.raises(ValueError):
        Scope.pair("a", "a")
