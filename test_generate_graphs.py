import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt  # noqa: E402

from generate_graphs import algorithms, collect_results, plot_results  # noqa: E402


def test_collect_results_covers_every_pattern():
    results = collect_results(length=40, max_page=6, frame_count=3, random_seed=1)
    assert list(results) == ['random', 'locality', 'sequential']
    for simulators in results.values():
        assert list(simulators) == algorithms
        faults = {alg: sim.fault_count for alg, sim in simulators.items()}
        assert faults['OPTIMAL'] == min(faults.values())


def test_plot_results_writes_png(tmp_path):
    results = collect_results(length=30, max_page=5, frame_count=2, random_seed=2)
    target = tmp_path / 'comparison.png'
    fig = plot_results(results, filename=str(target))
    plt.close(fig)
    assert target.exists()
    assert target.stat().st_size > 0
