#main.py

import argparse
import cProfile
import pstats
import constants as C
import logger
from stopwatch import Stopwatch
from benchmark import BenchmarkRunner

def run_benchmark(seed=C.BENCH_SEED, plot_path=None):
    runner = BenchmarkRunner(seed=seed)
    runner.run()
    for line in runner.summary_lines():
        print(line)
    if plot_path:
        runner.generate_and_save_graph(plot_path)
    return runner

def run_profile(seed=C.BENCH_SEED):
    profiler = cProfile.Profile()
    try:
        profiler.runcall(run_benchmark, seed)
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)

def run_viewer(capacity, point_count, seed=None):
    # Imported here so bench/profile runs never need a display.
    from viewer import Viewer
    Viewer(capacity=capacity, point_count=point_count, seed=seed).run()

def build_parser():
    parser = argparse.ArgumentParser(description="QuadTree benchmark, profiler and viewer.")
    sub = parser.add_subparsers(dest='command', required=True)

    bench = sub.add_parser('bench', help="Time QuadTree against a linear scan.")
    bench.add_argument('--seed', type=int, default=C.BENCH_SEED)
    bench.add_argument('--plot', metavar='PATH', nargs='?', const=C.GRAPH_FILE_PATH, default=None,
                       help=f"Save a search-time graph (default path: {C.GRAPH_FILE_PATH}).")

    profile = sub.add_parser('profile', help="Run the benchmark under cProfile.")
    profile.add_argument('--seed', type=int, default=C.BENCH_SEED)

    view = sub.add_parser('view', help="Open the interactive pygame viewer.")
    view.add_argument('--capacity', type=int, default=C.VIEWER_CAPACITY)
    view.add_argument('--points', type=int, default=C.VIEWER_POINT_COUNT)
    view.add_argument('--seed', type=int, default=None)
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    stopwatch = Stopwatch()
    stopwatch.start()
    logger.set_stopwatch(stopwatch)
    logger.log(f"--- {args.command} start ---")

    if args.command == 'bench':
        run_benchmark(args.seed, args.plot)
    elif args.command == 'profile':
        run_profile(args.seed)
    elif args.command == 'view':
        run_viewer(args.capacity, args.points, args.seed)

    logger.log(f"--- {args.command} exit ---")
    logger.set_stopwatch(None)

if __name__ == '__main__':
    main()
