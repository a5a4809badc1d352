"""
Timing harness for :class:`~symtab.datastructures.OrderedMap`.

Each operation is run on freshly generated random pairs for a series of
doubling input sizes; average and standard deviation (ms) are written to CSV.
Random keys keep the tree shallow on average, so the recorded height stays
well below the input size.
"""

import csv
import random
import statistics
import time

from .datastructures.bst import OrderedMap

# Default number of doublings and repetitions per measurement.
DEFAULT_STEPS = 6
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Height",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int):
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = DEFAULT_ITERATIONS):
    """Run the operation multiple times and return average, std deviation (ms) and tree height."""
    times = []
    height = 0
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        m = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        height = max(height, m.height())

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, height


# ----------------------------
# Operations to Benchmark
# ----------------------------

def build(data):
    m = OrderedMap()
    for k, v in data:
        m.put(k, v)
    return m


def bench_get(data):
    m = build(data)
    for k, _ in data:
        m.get(k)
    return m


def bench_delete(data):
    m = build(data)
    for k, _ in data[: len(data) // 2]:
        m.delete(k)
    return m


def bench_items(data):
    m = build(data)
    for _ in m.items():
        pass
    return m


OPERATIONS = {
    "put": build,
    "get": bench_get,
    "delete": bench_delete,
    "items": bench_items,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = DEFAULT_STEPS,
                   iterations: int = DEFAULT_ITERATIONS):
    """Run doubling-size benchmarks and write one CSV row per (operation, size).

    Returns the rows written (without the header).
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, height = measure_operation_time(op_func, size, iterations)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", height]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Height: {height}")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
