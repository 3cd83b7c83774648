import importlib

import pytest

Circuit = importlib.import_module('phasebal.domain.circuit').Circuit
Panel = importlib.import_module('phasebal.domain.panel').Panel
InvalidConfiguration = importlib.import_module('phasebal.domain.errors').InvalidConfiguration


@pytest.mark.parametrize(
    "load, phases, expected",
    [
        (6000, 2, (3000, 3000)),
        (6000, 3, (2000, 2000, 2000)),
        (2000, 1, (2000,)),
        (5001, 2, (2500, 2500)),
        (7000, 3, (2333, 2333, 2333)),
        (0, 2, (0, 0)),
    ],
)
def test_phase_shares(load, phases, expected):
    c = Circuit("c", load, phases)
    assert c.phase_shares == expected
    assert len(c.phase_shares) == c.phase_count


@pytest.mark.parametrize("load", [0, 1, 5000, 5001, 7001, 9999])
@pytest.mark.parametrize("phases", [1, 2, 3])
def test_truncation_shortfall(load, phases):
    c = Circuit("c", load, phases)
    assert c.distributed_load == sum(c.phase_shares) <= load
    assert load - c.distributed_load == load % phases


def test_shares_are_stable():
    c = Circuit("Shower", 5000, 2)
    assert c.phase_shares is c.phase_shares
    assert Circuit("Shower", 5000, 2).phase_shares == c.phase_shares


def test_circuit_is_immutable():
    c = Circuit("Lighting", 2000, 1)
    with pytest.raises(AttributeError):
        c.total_load = 10


@pytest.mark.parametrize("phases", [0, 4, -1, 2.0, True])
def test_invalid_phase_count(phases):
    with pytest.raises(InvalidConfiguration):
        Circuit("bad", 1000, phases)


@pytest.mark.parametrize("load", [-1, 100.5, "100"])
def test_invalid_load(load):
    with pytest.raises(InvalidConfiguration):
        Circuit("bad", load, 1)


def test_uneven_load_is_logged(caplog):
    with caplog.at_level("WARNING", logger="phasebal.domain.circuit"):
        Circuit("Heater", 5001, 2)
    assert "1 W dropped" in caplog.text


def test_panel_keeps_insertion_order(reference_circuits):
    panel = Panel("QD1", reference_circuits)
    assert [c.name for c in panel.circuits] == [c.name for c in reference_circuits]
    assert panel.circuits is not reference_circuits
    assert panel.result is None


def test_panel_rejects_duplicate_names():
    with pytest.raises(InvalidConfiguration):
        Panel("QD1", [Circuit("A", 100, 1), Circuit("A", 200, 1)])
