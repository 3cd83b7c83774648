# cli/demo.py   (внешний скрипт запуска)

import logging

from phasebal import Circuit, Panel, PanelAnalyzer


def reference_panel() -> Panel:
    """Эталонный щит QD1: два душа, розетки, освещение и насос."""
    circuits = [
        Circuit("Shower 01", 6000, 2),
        Circuit("Shower 02", 5000, 2),
        Circuit("Specific-use outlet", 3000, 1),
        Circuit("General-use outlet", 5000, 1),
        Circuit("Lighting", 2000, 1),
        Circuit("Water pump", 6000, 3),
    ]
    return Panel("QD1", circuits)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    analyzer = PanelAnalyzer(reference_panel())
    analyzer.balance()
    print(analyzer.table(with_totals=True).to_string(index=False))

    comparison = analyzer.compare()
    print(comparison.to_string(index=False))

    analyzer.plot_phase_totals()
    analyzer.plot_allocation()
    analyzer.plot_strategy_amplitudes(comparison)

if __name__ == "__main__":
    main()
