"""Tests for the country lookup tables and the JSON readers."""
from __future__ import annotations

import json

import pandas as pd
import pytest

from dataset import FILES, LAW_FIELDS, TOPICS, Dataset, read_laws, read_rates


# ── Relevance ────────────────────────────────────────────────


@pytest.mark.parametrize("name", ["India", "Nepal", "Bhutan"])
def test_dataset_keys_are_relevant(laws, name):
    assert laws.is_relevant(name)
    assert name in laws


@pytest.mark.parametrize("name", ["Atlantis", "india", " India", "", None, 42, ("India",)])
def test_anything_else_is_not_relevant(laws, name):
    assert not laws.is_relevant(name)


def test_relevance_matches_keys_exactly(rates):
    names = ["India", "INDIA", "Pakistan", "Pakistan ", "Narnia", "Sri Lanka", "SriLanka"]
    for name in names:
        assert rates.is_relevant(name) == (name in rates.countries())


# ── Lookup ───────────────────────────────────────────────────


def test_lookup_field(laws):
    assert laws.lookup("Nepal", "childCustody") == "Mother until five."


def test_lookup_whole_record(rates):
    assert rates.lookup("India") == 1.1


def test_lookup_missing_country_or_field_gives_default(laws, rates):
    assert laws.lookup("Atlantis", "childCustody") is None
    assert laws.lookup("Bhutan", "childCustody") is None
    assert laws.lookup("Bhutan", "childCustody", "") == ""
    assert rates.lookup("Atlantis", default=0.0) == 0.0
    # a scalar record has no fields
    assert rates.lookup("India", "rate") is None


def test_dataset_is_a_frozen_copy():
    src = {"India": 1.1}
    ds = Dataset(src)
    src["Nepal"] = 0.7
    assert not ds.is_relevant("Nepal")
    with pytest.raises(TypeError):
        ds._records["Nepal"] = 0.7


def test_from_frame_drops_missing_cells():
    df = pd.DataFrame(
        {"marriageRegistration": ["a", None], "childCustody": ["b", "c"]},
        index=["India", "Nepal"],
    )
    ds = Dataset.from_frame(df)
    assert ds.lookup("India") == {"marriageRegistration": "a", "childCustody": "b"}
    assert ds.lookup("Nepal") == {"childCustody": "c"}


def test_from_series_drops_missing_rates():
    ds = Dataset.from_series(pd.Series({"India": 1.1, "Nepal": float("nan")}))
    assert ds.countries() == ["India"]
    assert len(ds) == 1


# ── Readers ──────────────────────────────────────────────────


def test_read_laws_fills_and_strips(tmp_path):
    path = tmp_path / "laws.json"
    path.write_text(json.dumps({
        " India ": {"marriageRegistration": "  text  ", "childCustody": "c"},
    }), encoding="utf-8")

    df = read_laws(path)
    assert list(df.columns) == LAW_FIELDS
    assert df.index.tolist() == ["India"]
    assert df.loc["India", "marriageRegistration"] == "text"
    assert df.loc["India", "propertyDivision"] == ""


def test_law_columns_follow_the_topics(tmp_path):
    assert LAW_FIELDS == [t.field for t in TOPICS]

    path = tmp_path / "laws.json"
    path.write_text(json.dumps({"India": {}}), encoding="utf-8")
    assert list(read_laws(path).columns) == [t.field for t in TOPICS]


def test_read_rates_coerces_and_drops(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text(json.dumps({"India": 1.1, "Nepal": "0.7", "Atlantis": "n/a"}), encoding="utf-8")

    s = read_rates(path)
    assert s.to_dict() == {"India": 1.1, "Nepal": 0.7}


def test_read_missing_file_raises(tmp_path):
    with pytest.raises((FileNotFoundError, ValueError)):
        read_rates(tmp_path / "nope.json")


# ── Shipped data ─────────────────────────────────────────────


def test_shipped_laws_have_every_topic():
    ds = Dataset.from_frame(read_laws(FILES["laws"]))
    assert len(ds) >= 4
    for country in ds:
        for field in LAW_FIELDS:
            assert ds.lookup(country, field), f"{country} has no {field}"


def test_shipped_rates():
    ds = Dataset.from_series(read_rates(FILES["rates"]))
    assert ds.lookup("India") == 1.1
    assert set(ds) == {"India", "Nepal", "Pakistan", "Bangladesh"}
