"""Read-only catalog of audit records."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path

from transparentgov.models.audit import AuditRecord, AuditStatus


class UnknownRecordError(KeyError):
    """Raised when an id is not part of the catalog."""


class Catalog:
    """Ordered, immutable collection of audit records.

    Built once at startup and shared by reference; nothing mutates it.
    """

    def __init__(self, records: Iterable[AuditRecord]) -> None:
        self._records: tuple[AuditRecord, ...] = tuple(records)
        self._by_id: dict[str, AuditRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise ValueError(f"Duplicate audit record id: {record.id}")
            self._by_id[record.id] = record

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> Catalog:
        return cls(AuditRecord.from_dict(item) for item in items)

    @classmethod
    def from_json(cls, path: str | Path) -> Catalog:
        """Load a catalog from a JSON array of camelCase record mappings."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dicts(data)

    def get(self, record_id: str) -> AuditRecord:
        try:
            return self._by_id[record_id]
        except KeyError:
            raise UnknownRecordError(record_id) from None

    def flagged(self) -> list[AuditRecord]:
        """Records whose status is anything other than Fair."""
        return [r for r in self._records if not r.is_fair]

    def biased(self) -> list[AuditRecord]:
        return [r for r in self._records if r.status is AuditStatus.BIAS_DETECTED]

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    def __iter__(self) -> Iterator[AuditRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
