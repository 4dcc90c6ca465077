# tools/profile_suggest.py
"""
Small profiling harness for Autocomplete.matching.
Usage:
  python tools/profile_suggest.py --terms 100000 --iters 1000
  python tools/profile_suggest.py --dictionary wiktionary.txt --iters 500

Prints mean/median/p90/max latency in ms for random prefixes.
"""
import argparse
import random
import statistics
import string
import time

from weighted_autocomplete.core import Autocomplete, Term
from weighted_autocomplete.utils.logger_utils import Log
from weighted_autocomplete.utils.term_loader import load_terms


def synthetic_terms(n, seed=0):
    rng = random.Random(seed)
    letters = string.ascii_lowercase[:12]
    out = []
    for _ in range(n):
        word = "".join(rng.choice(letters) for _ in range(rng.randint(1, 9)))
        out.append(Term(word, rng.randint(0, 1_000_000)))
    return out


def benchmark(index, prefixes, iterations=200, seed=0):
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        p = rng.choice(prefixes)
        t0 = time.perf_counter()
        _ = index.matching(p)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": max(times_sorted),
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", type=str, default=None, help="weight<TAB>text file")
    parser.add_argument("--terms", type=int, default=50_000, help="synthetic corpus size")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    args = parser.parse_args(argv)

    with Log.time_block("build index"):
        terms = load_terms(args.dictionary) if args.dictionary else synthetic_terms(args.terms)
        index = Autocomplete(terms)

    if not terms:
        print("No terms to profile: the dictionary is empty.")
        return

    # prefixes of 1-3 chars taken from the corpus itself
    rng = random.Random(1)
    sample = [t.text for t in rng.sample(terms, min(len(terms), 200))]
    prefixes = [w[: rng.randint(1, 3)] for w in sample]

    s = summarize(benchmark(index, prefixes, iterations=args.iters))
    print("Profiling summary (ms):", {k: round(v, 4) for k, v in s.items()})
    print("Sample:", [str(t) for t in index.matching(prefixes[0])[:5]])


if __name__ == "__main__":
    main()
