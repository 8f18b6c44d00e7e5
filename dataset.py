# dataset.py
# -----------------------------------------------------------------------------
# Static country datasets for the divorce-law map.
# - Read-only lookup tables keyed by the exact country name
# - JSON readers for the laws (topic text) and rates (per 1000) documents
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

import numpy as np
import pandas as pd

log = logging.getLogger(__name__)

ROOT = Path(__file__).parent
DATA_DIR = ROOT / "data"
FILES = {
    "laws":  DATA_DIR / "divorce_laws.json",
    "rates": DATA_DIR / "divorce_rates.json",
}


class Topic(NamedTuple):
    key: str
    field: str
    color: str
    icon: str

    @property
    def title(self) -> str:
        # "marriageRegistration" -> "Marriage Registration"
        s = re.sub(r"([A-Z])", r" \1", self.field).strip()
        return s[:1].upper() + s[1:]


TOPICS = (
    Topic("registration", "marriageRegistration", "blue",   "📄"),
    Topic("jurisdiction", "divorceJurisdiction",  "red",    "⚖️"),
    Topic("custody",      "childCustody",         "green",  "👪"),
    Topic("division",     "propertyDivision",     "yellow", "🏠"),
)

LAW_FIELDS = [t.field for t in TOPICS]


class Dataset:
    """Immutable mapping of country name -> record."""

    def __init__(self, records=None):
        self._records = MappingProxyType(dict(records or {}))

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Dataset":
        """One record per row; the index holds the country name."""
        records = {}
        for country, row in df.iterrows():
            records[str(country)] = {k: v for k, v in row.items() if not _is_missing(v)}
        return cls(records)

    @classmethod
    def from_series(cls, s: pd.Series) -> "Dataset":
        return cls({str(country): float(v) for country, v in s.items() if not _is_missing(v)})

    def is_relevant(self, name) -> bool:
        return isinstance(name, str) and name in self._records

    def lookup(self, name, field: str | None = None, default=None):
        if not self.is_relevant(name):
            return default
        record = self._records[name]
        if field is None:
            return record
        if not isinstance(record, dict):
            return default
        return record.get(field, default)

    def countries(self) -> list[str]:
        return list(self._records)

    def __contains__(self, name) -> bool:
        return self.is_relevant(name)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset({len(self)} countries)"


def _is_missing(v) -> bool:
    if v is None:
        return True
    if isinstance(v, (float, np.floating)):
        return bool(np.isnan(v))
    return False


# ─────────────────────────────────────────────────────────────────────────────
# Readers
# ─────────────────────────────────────────────────────────────────────────────
def read_laws(path: Path | str = FILES["laws"]) -> pd.DataFrame:
    """Laws document -> frame indexed by country, one column per topic field."""
    df = pd.read_json(path, orient="index", dtype=False)
    if df.empty:
        return pd.DataFrame(columns=LAW_FIELDS)

    df.index = df.index.astype(str).str.strip()
    for c in LAW_FIELDS:
        if c not in df.columns:
            log.warning("laws document has no %r column; filling with blanks", c)
            df[c] = ""
        df[c] = df[c].fillna("").astype(str).str.strip()
    return df[LAW_FIELDS]


def read_rates(path: Path | str = FILES["rates"]) -> pd.Series:
    """Rates document -> numeric series indexed by country (rows without a rate dropped)."""
    s = pd.read_json(path, typ="series", dtype=False)
    s.index = s.index.astype(str).str.strip()
    s = pd.to_numeric(s, errors="coerce")
    bad = s[s.isna()]
    if not bad.empty:
        log.warning("dropping %d rate rows without a number: %s", len(bad), ", ".join(bad.index))
    return s.dropna().astype(float).rename("rate")
