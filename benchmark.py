# benchmark.py

import time
import numpy as np
import matplotlib.pyplot as plt
import logger as log
import constants as C
from quadtree import QuadTree
from naive import NaiveIndex
from point_sets import XorShift64, xorshift_points, random_query

class BenchmarkMismatchError(Exception):
    """Raised when the quadtree and the naive index disagree on a search."""

class BenchmarkRunner:
    """
    Times QuadTree against NaiveIndex for growing point counts and
    collects the results as series for printing and plotting.
    """
    def __init__(self, seed=C.BENCH_SEED, world_size=C.BENCH_WORLD_SIZE, query_size=C.BENCH_QUERY_SIZE,
                 sizes=None, repeats=C.BENCH_SEARCH_REPEATS, capacity=C.DEFAULT_CAPACITY, clock=time.perf_counter):
        self.rng = XorShift64(seed, upper=world_size)
        self.world = (0, world_size, 0, world_size)
        self.query_size = query_size
        if sizes is None:
            sizes = range(C.BENCH_SIZE_START, C.BENCH_SIZE_END + 1, C.BENCH_SIZE_STEP)
        self.sizes = list(sizes)
        self.repeats = repeats
        self.capacity = capacity
        self.clock = clock
        self.search_boundary = None
        self.data = {
            'sizes': [],
            'quadtree_search_us': [],
            'naive_search_us': [],
            'quadtree_insert_ms': [],
            'naive_insert_ms': [],
            'found': [],
        }
        log.log(f"BenchmarkRunner initialized for {len(self.sizes)} sizes, {repeats} search repeats each.")

    def has_data(self):
        return len(self.data['sizes']) > 0

    def _time_inserts(self, index, points):
        start = self.clock()
        for p in points:
            index.insert(p)
        return (self.clock() - start) * C.MILLISECONDS_PER_SECOND

    def _time_search(self, index):
        """Returns (median microseconds per search, last result)."""
        samples = []
        result = []
        for _ in range(self.repeats):
            start = self.clock()
            result = index.search(self.search_boundary)
            samples.append((self.clock() - start) * C.MICROSECONDS_PER_SECOND)
        return float(np.median(samples)), result

    def run_size(self, count):
        """Benchmarks a single point count and appends one sample to every series."""
        qt = QuadTree.with_capacity(self.capacity, self.world)
        naive = NaiveIndex(self.world)
        points = xorshift_points(self.rng, count)

        qt_insert_ms = self._time_inserts(qt, points)
        naive_insert_ms = self._time_inserts(naive, points)
        qt_search_us, qt_found = self._time_search(qt)
        naive_search_us, naive_found = self._time_search(naive)

        if set(qt_found) != set(naive_found) or qt.size() != naive.size():
            raise BenchmarkMismatchError(
                f"QuadTree and NaiveIndex disagree at {count} points: "
                f"{len(qt_found)} vs {len(naive_found)} found, size {qt.size()} vs {naive.size()}")

        self.data['sizes'].append(count)
        self.data['quadtree_search_us'].append(qt_search_us)
        self.data['naive_search_us'].append(naive_search_us)
        self.data['quadtree_insert_ms'].append(qt_insert_ms)
        self.data['naive_insert_ms'].append(naive_insert_ms)
        self.data['found'].append(len(qt_found))
        log.debug(f"[Benchmark] {count} points: QuadTree {qt_search_us:.2f} us, Naive {naive_search_us:.2f} us")

    def run(self):
        """Runs every configured size against one fixed search rectangle."""
        self.search_boundary = random_query(self.rng, self.query_size)
        log.log(f"[Benchmark] QuadTree vs Naive, search boundary {self.search_boundary}")
        for count in self.sizes:
            self.run_size(count)
        log.log(f"[Benchmark] Finished {len(self.data['sizes'])} sizes.")
        return self.data

    def summary_lines(self):
        lines = [f"{'points':>8} {'found':>6} {'qt search us':>13} {'naive search us':>16} {'qt insert ms':>13} {'naive insert ms':>16}"]
        for i, count in enumerate(self.data['sizes']):
            lines.append(
                f"{count:>8} {self.data['found'][i]:>6} "
                f"{self.data['quadtree_search_us'][i]:>13.2f} {self.data['naive_search_us'][i]:>16.2f} "
                f"{self.data['quadtree_insert_ms'][i]:>13.2f} {self.data['naive_insert_ms'][i]:>16.2f}")
        return lines

    def generate_and_save_graph(self, file_path=C.GRAPH_FILE_PATH):
        """
        Uses matplotlib to plot search time against point count for both indexes.
        """
        if not self.has_data():
            log.log("[Benchmark] No data collected, skipping plot generation.")
            return None

        log.log(f"[Benchmark] Generating search plot with {len(self.data['sizes'])} data points...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['sizes'], self.data['quadtree_search_us'], label='QuadTree', color='tab:blue')
        ax.plot(self.data['sizes'], self.data['naive_search_us'], label='Naive', color='tab:orange')

        ax.set_title('QuadTree vs Naive: Search Time')
        ax.set_xlabel('Points Inserted')
        ax.set_ylabel('Median Search Time (microseconds)')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()

        try:
            fig.savefig(file_path)
            log.log(f"[Benchmark] Search graph saved to {file_path}")
        except Exception as e:
            log.log(f"[Benchmark] ERROR: Could not save search graph. Reason: {e}")
            file_path = None
        finally:
            plt.close(fig)
        return file_path
