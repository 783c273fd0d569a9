# tenant_seed/services/summary.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SeedCounts:
    inserted: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.skipped


@dataclass
class RunSummary:
    """
    Per-category counters for one seeding run. Only ever printed.
    """

    schema_name: str
    counts: dict[str, SeedCounts] = field(default_factory=dict)
    backfilled: int | None = None

    def category(self, name: str) -> SeedCounts:
        return self.counts.setdefault(name, SeedCounts())

    def lines(self) -> list[str]:
        out = [f"Schema: {self.schema_name}"]
        for name, c in self.counts.items():
            out.append(f"{name}: {c.total} total ({c.inserted} new)")
        if self.backfilled is not None:
            out.append(f"Patient UIDs backfilled: {self.backfilled}")
        return out
