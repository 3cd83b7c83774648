import importlib
import itertools
import logging

PanelAnalyzer = importlib.import_module('phasebal.facade.analyzer').PanelAnalyzer
plots = importlib.import_module('phasebal.visualization.plots')
demo = importlib.import_module('phasebal.cli.demo')
Panel = importlib.import_module('phasebal.domain.panel').Panel
Circuit = importlib.import_module('phasebal.domain.circuit').Circuit
RandomizedStrategy = importlib.import_module('phasebal.strategies.randomized').RandomizedStrategy


def test_table_with_totals(reference_panel):
    analyzer = PanelAnalyzer(reference_panel, ["as_given", "descending", "ascending"])
    df = analyzer.table(with_totals=True)
    assert list(df.columns) == ["Circuit", "R", "S", "T"]
    assert len(df) == len(reference_panel.circuits) + 1
    totals = df.iloc[-1]
    assert totals["Circuit"] == "Totals"
    assert (totals["R"], totals["S"], totals["T"]) == (9500, 8000, 9500)
    assert reference_panel.result.strategy == "descending"


def test_table_without_totals(reference_panel):
    df = PanelAnalyzer(reference_panel).table(with_totals=False)
    assert "Totals" not in list(df["Circuit"])
    assert df[["R", "S", "T"]].to_numpy().sum() == 27000


def test_empty_table():
    df = PanelAnalyzer(Panel("Empty")).table(with_totals=False)
    assert df.empty
    assert list(df.columns) == ["Circuit", "R", "S", "T"]


def test_compare_has_one_selected(reference_panel):
    df = PanelAnalyzer(reference_panel).compare()
    assert len(df) == 4
    assert df["Selected"].sum() == 1
    assert df.loc[df["Selected"], "Amplitude"].iloc[0] == df["Amplitude"].min()


def test_plots_run(reference_panel, no_show):
    analyzer = PanelAnalyzer(reference_panel)
    analyzer.plot_phase_totals()
    analyzer.plot_allocation()
    analyzer.plot_strategy_amplitudes()


def test_plot_allocation_empty(no_show):
    plots.plot_allocation(PanelAnalyzer(Panel("Empty")).balance())


def test_demo_main(no_show, capsys, monkeypatch):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    demo.main()
    out = capsys.readouterr().out
    assert "Totals" in out
    assert "descending" in out


def test_demo_reference_panel():
    panel = demo.reference_panel()
    assert panel.name == "QD1"
    assert [c.phase_count for c in panel.circuits] == [2, 2, 1, 1, 1, 3]


def test_compare_matches_balanced_result():
    circuits = [
        Circuit("C0", 600, 2),
        Circuit("C1", 600, 2),
        Circuit("C2", 600, 1),
        Circuit("C3", 600, 3),
        Circuit("C4", 600, 3),
    ]
    # 1st run: C0, C2, C1 ... balances perfectly; 2nd run repeats the as-given order
    orders = itertools.cycle([[0, 2, 1, 3, 4], [0, 1, 2, 3, 4]])
    randomized = RandomizedStrategy(permutation=lambda n: next(orders))
    analyzer = PanelAnalyzer(Panel("P", circuits), ["as_given", randomized])

    result = analyzer.balance()
    assert result.strategy == "randomized"
    assert result.amplitude == 0

    df = analyzer.compare()
    assert list(df["Strategy"]) == ["as_given", "randomized"]
    assert list(df["Selected"]) == [False, True]
    assert list(df["Amplitude"]) == [600, 0]
    assert analyzer.panel.result is result


def test_compare_balances_on_demand(reference_panel):
    analyzer = PanelAnalyzer(reference_panel, ["as_given", "descending", "ascending"])
    df = analyzer.compare()
    assert reference_panel.result is not None
    assert df.loc[df["Selected"], "Strategy"].iloc[0] == reference_panel.result.strategy
