#!/usr/bin/env python3
"""
Benchmark Script for the LRU Cache

Measures get/put throughput of LRUCache and SynchronizedLRUCache, and
checks that per-operation cost stays flat as capacity grows.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 50000 # Custom operation count
    python scripts/benchmark.py --profile          # Enable cProfile
    python scripts/benchmark.py --debug            # Debug logging (slow: logs every eviction)
"""

import argparse
import logging
import os
import random
import statistics
import string
import sys
import time
from typing import Any, Callable, Dict, List

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lrucache import LRUCache, SynchronizedLRUCache
from lrucache.config.settings import settings

logger = logging.getLogger("benchmark")


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms
        times.append(elapsed)

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for the cache."""

    def __init__(self, operations: int = 10000, key_size: int = 16, value_size: int = 64):
        self.operations = operations
        self.key_size = key_size
        self.value_size = value_size

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _report(self, func: Callable, operation: str) -> Dict[str, Any]:
        stats = measure_time(func)
        stats["ops_per_second"] = self.operations / (stats["total_ms"] / 1000)
        stats["operation"] = operation
        stats["count"] = self.operations
        return stats

    def benchmark_put(self) -> Dict[str, Any]:
        """Benchmark PUT of new keys without eviction."""
        cache = LRUCache(capacity=self.operations * 2)

        def run():
            for i in range(self.operations):
                cache.put(self.keys[i], self.values[i])

        return self._report(run, "PUT")

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark GET operations (cache hits)."""
        cache = LRUCache(capacity=self.operations * 2)
        for i in range(self.operations):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations):
                cache.get(self.keys[i])

        return self._report(run, "GET (hit)")

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark GET operations (cache misses)."""
        cache = LRUCache(capacity=self.operations * 2)
        miss_keys = [random_string(self.key_size) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                cache.get(key)

        return self._report(run, "GET (miss)")

    def benchmark_eviction(self) -> Dict[str, Any]:
        """Benchmark PUT with LRU eviction on every call."""
        capacity = max(1, self.operations // 10)
        cache = LRUCache(capacity=capacity)

        def run():
            for i in range(self.operations):
                cache.put(self.keys[i], self.values[i])

        stats = self._report(run, "PUT (with eviction)")
        stats["evictions"] = cache.get_stats()["evictions"]
        return stats

    def benchmark_mixed_workload(self) -> Dict[str, Any]:
        """Benchmark mixed PUT/GET workload (50/50) on a cache under pressure."""
        half = max(1, self.operations // 2)
        cache = LRUCache(capacity=max(1, half // 2))

        def run():
            for i in range(self.operations):
                if i % 2 == 0:
                    cache.put(self.keys[i % half], self.values[i])
                else:
                    cache.get(self.keys[i % half])

        return self._report(run, "Mixed (50% PUT, 50% GET)")

    def benchmark_synchronized(self) -> Dict[str, Any]:
        """Benchmark the lock-guarded wrapper (single thread)."""
        cache = SynchronizedLRUCache(capacity=max(1, self.operations // 10))

        def run():
            for i in range(self.operations):
                cache.put(self.keys[i], self.values[i])
                cache.get(self.keys[i])

        return self._report(run, "Synchronized PUT+GET")

    def benchmark_scaling(self) -> List[Dict[str, Any]]:
        """Run the eviction workload at growing capacities."""
        results = []
        for capacity in (16, 256, 4096, 65536):
            cache = LRUCache(capacity=capacity)
            for i in range(capacity):
                cache.put(i, i)

            def run():
                for i in range(self.operations):
                    cache.put(self.keys[i], self.values[i])

            results.append(self._report(run, f"PUT (evicting, cap={capacity})"))
        return results

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            ("PUT", self.benchmark_put),
            ("GET (hit)", self.benchmark_get),
            ("GET (miss)", self.benchmark_get_miss),
            ("PUT (eviction)", self.benchmark_eviction),
            ("Mixed workload", self.benchmark_mixed_workload),
            ("Synchronized", self.benchmark_synchronized),
        ]

        results = []
        for name, func in benchmarks:
            print(f"Running: {name}...", end=" ", flush=True)
            result = func()
            print(f"{result['ops_per_second']:,.0f} ops/sec")
            results.append(result)

        print("Running: capacity scaling...", flush=True)
        results.extend(self.benchmark_scaling())
        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print("                        BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Operation':<32} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>10}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<32} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>10.1f}")

    print("=" * 70)

    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")
    print(f"Average throughput: {total_ops / (total_time / 1000):,.0f} ops/sec")


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the LRU cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--operations", "-n",
        type=int,
        default=10000,
        help="Number of operations per benchmark"
    )
    parser.add_argument(
        "--key-size",
        type=int,
        default=16,
        help="Size of keys"
    )
    parser.add_argument(
        "--value-size",
        type=int,
        default=64,
        help="Size of values"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Enable cProfile profiling"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(debug=args.debug)

    logger.info(f"Operations per test: {args.operations:,}")
    logger.info(f"Key size: {args.key_size}, value size: {args.value_size}")

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        value_size=args.value_size,
    )

    if args.profile:
        import cProfile
        import pstats

        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark.run_all()
        profiler.disable()

        print_results(results)

        print()
        print("Profiling Results (top 20):")
        print("-" * 70)
        stats = pstats.Stats(profiler)
        stats.sort_stats('cumulative')
        stats.print_stats(20)
    else:
        results = benchmark.run_all()
        print_results(results)


if __name__ == "__main__":
    main()
