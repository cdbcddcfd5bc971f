import pytest

from cachematrix.benchmark import benchmark, plot_results


def test_benchmark_small(capsys):
    results = benchmark(n=20, runs=2)

    assert [r[0] for r in results] == [0, 1, 2]
    assert all(t_miss >= 0 and t_hit >= 0 for _, t_miss, t_hit in results)
    out = capsys.readouterr().out
    assert "Matrix size: 20x20 (method=numpy)" in out


def test_benchmark_forwards_options(capsys):
    results = benchmark(n=40, runs=1, method="lu", tol=1e-10)
    assert len(results) == 2
    assert "method=lu" in capsys.readouterr().out


def test_plot_results(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")

    path = plot_results([10, 20], [1.0, 2.0], [0.001, 0.001], path=str(tmp_path / "out.png"))
    assert (tmp_path / "out.png").exists()
    assert path.endswith("out.png")
