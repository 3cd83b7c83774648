import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

Circuit = importlib.import_module('phasebal.domain.circuit').Circuit
Panel = importlib.import_module('phasebal.domain.panel').Panel


@pytest.fixture
def reference_circuits():
    return [
        Circuit("Shower 01", 6000, 2),
        Circuit("Shower 02", 5000, 2),
        Circuit("Specific-use outlet", 3000, 1),
        Circuit("General-use outlet", 5000, 1),
        Circuit("Lighting", 2000, 1),
        Circuit("Water pump", 6000, 3),
    ]


@pytest.fixture
def reference_panel(reference_circuits):
    return Panel("QD1", reference_circuits)


@pytest.fixture
def no_show(monkeypatch):
    plt = importlib.import_module('matplotlib.pyplot')
    monkeypatch.setattr(plt, "show", lambda *a, **k: None)
    yield plt
    plt.close("all")
