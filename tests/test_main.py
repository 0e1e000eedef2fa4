import main


def test_parser_commands():
    parser = main.build_parser()
    args = parser.parse_args(["bench", "--seed", "3", "--plot", "out.png"])
    assert (args.command, args.seed, args.plot) == ("bench", 3, "out.png")
    args = parser.parse_args(["bench", "--plot"])
    assert args.plot == main.C.GRAPH_FILE_PATH
    args = parser.parse_args(["view", "--capacity", "2", "--points", "10"])
    assert (args.capacity, args.points, args.seed) == (2, 10, None)


def test_main_dispatches_bench(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(main, "run_benchmark", lambda seed, plot: calls.append((seed, plot)))
    main.main(["bench", "--seed", "5"])
    assert calls == [(5, None)]
    out = capsys.readouterr().out
    assert "--- bench start ---" in out
    assert "--- bench exit ---" in out


def test_run_benchmark_prints_summary(monkeypatch, capsys):
    original = main.BenchmarkRunner

    def small_runner(seed):
        return original(seed=seed, world_size=500, sizes=[20, 40], repeats=2)

    monkeypatch.setattr(main, "BenchmarkRunner", small_runner)
    runner = main.run_benchmark(seed=1)
    assert runner.data['sizes'] == [20, 40]
    assert "qt search us" in capsys.readouterr().out
