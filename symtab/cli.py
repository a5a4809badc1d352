"""
Symbol table command-line interface (CLI)

Subcommands:
- sort:    load key=value pairs into an OrderedMap and print them in key order
- buckets: hash random ModuloKey values into a HashTable and report chain lengths
- bench:   time OrderedMap operations and write the results to CSV

Usage examples:
    python -m symtab.cli sort pairs.txt --int-keys --delete 7
    printf 'b=2\\na=1\\n' | python -m symtab.cli sort
    python -m symtab.cli buckets --count 10000 --max-key 100 --seed 1
    python -m symtab.cli bench --path bst.csv --base-input 100 --steps 4
"""

import argparse
import csv
import random
import sys

from .bench import DEFAULT_ITERATIONS, DEFAULT_STEPS, run_benchmarks
from .datastructures import DEFAULT_BUCKET_COUNT, HashTable, OrderedMap
from .keys import ModuloKey


# -------------------------------------------------------------------
# Utility: input parsing
# -------------------------------------------------------------------
def parse_pair(line, int_keys=False):
    """Split a ``key=value`` line. Raises ValueError on malformed input."""
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"expected key=value, got {line!r}")
    return (int(key) if int_keys else key), value.strip()


def read_pairs(stream, int_keys=False):
    """Yield pairs from non-blank, non-comment lines of *stream*."""
    for line in stream:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield parse_pair(line, int_keys)


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def load_map(stream, int_keys=False):
    """Build an OrderedMap from the ``key=value`` lines of *stream*."""
    m = OrderedMap()
    for key, value in read_pairs(stream, int_keys):
        m.put(key, value)
    return m


def cmd_sort(args):
    """Build an OrderedMap from the input, apply deletions and print it in order."""
    if args.input == "-":
        m = load_map(sys.stdin, args.int_keys)
    else:
        with open(args.input, encoding="utf-8") as f:
            m = load_map(f, args.int_keys)
    for raw in args.delete:
        m.delete(int(raw) if args.int_keys else raw)

    print(f"size: {m.size()}")
    print(f"height: {m.height()}")
    for key, value in m.items():
        print(f"{key}={value}")


def cmd_buckets(args):
    """Report how many entries land in each bucket of a HashTable.

    Each draw is a new ModuloKey, so every one of the ``--count`` draws is
    stored even when the same number comes up twice.
    """
    rng = random.Random(args.seed)
    table = HashTable(args.buckets)
    for _ in range(args.count):
        data = rng.randrange(args.max_key)
        table.put(ModuloKey(data), data)

    sizes = table.bucket_sizes()
    for slot, count in enumerate(sizes):
        print(f"Slot {slot}: {count} elements")

    if args.csv:
        with open(args.csv, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["Slot", "Elements"])
            for slot, count in enumerate(sizes):
                writer.writerow([slot, count])
        print(f"Bucket report written to {args.csv}")


def cmd_bench(args):
    """Run the OrderedMap timing harness."""
    run_benchmarks(args.path, base_input=args.base_input, steps=args.steps, iterations=args.iterations)


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m symtab.cli", description="Symbol table CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Print key=value pairs in key order")
    s.add_argument("input", nargs="?", default="-", help="Path to key=value lines ('-' for stdin)")
    s.add_argument("--int-keys", action="store_true", help="Parse keys as integers")
    s.add_argument("--delete", action="append", default=[], metavar="KEY")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("buckets", help="Show HashTable bucket distribution")
    s.add_argument("--count", type=int, default=10000)
    s.add_argument("--max-key", type=int, default=100)
    s.add_argument("--buckets", type=int, default=DEFAULT_BUCKET_COUNT)
    s.add_argument("--seed", type=int, default=None)
    s.add_argument("--csv", default=None, metavar="PATH")
    s.set_defaults(func=cmd_buckets)

    s = sub.add_parser("bench", help="Benchmark OrderedMap operations")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    s.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m symtab.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
