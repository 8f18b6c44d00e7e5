"""Shared fixtures: small in-memory datasets shaped like the shipped JSON."""
from __future__ import annotations

import pytest

from dataset import Dataset

LAW_TEXT = {
    "marriageRegistration": "Registered under the Special Marriage Act.",
    "divorceJurisdiction": "Family Courts.",
    "childCustody": "Welfare of the child is paramount.",
    "propertyDivision": "No community property.",
}


@pytest.fixture
def laws():
    return Dataset({
        "India": dict(LAW_TEXT),
        "Nepal": dict(LAW_TEXT, childCustody="Mother until five."),
        # missing two topic fields on purpose
        "Bhutan": {"marriageRegistration": "Registered with the court."},
    })


@pytest.fixture
def rates():
    return Dataset({
        "India": 1.1,
        "Nepal": 0.7,
        "Pakistan": 0.9,
        "Bangladesh": 0.8,
        "Sri Lanka": 0.2,
        "Bhutan": 1.4,
    })


@pytest.fixture
def ab_rates():
    return Dataset({"A": 1.0, "B": 0.5})
