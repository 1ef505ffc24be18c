from __future__ import annotations

import argparse
import statistics
import time

from hindi_transliterator import HindiTransliterator, TransliteratorConfig


def _samples() -> list[str]:
    return [
        "Rajesh Kumar",
        "Priya Sharma",
        "Sandeep Shastri",
        "12, MG Road, Near Bus Stand, Delhi",
        "Flat 4B, Ganesh Nagar, Jaipur 302001",
        "xzqploq kavitha anirudh",
    ]


def _bench_warm(n: int, *, thread_safe: bool) -> dict[str, float]:
    texts = _samples()
    t = HindiTransliterator(TransliteratorConfig(thread_safe=thread_safe))

    # Warmup fills the word cache.
    for s in texts:
        _ = t.get_suggestion(s)

    t0 = time.perf_counter()
    for _ in range(n):
        for s in texts:
            _ = t.get_suggestion(s)
    total = time.perf_counter() - t0

    return {
        "total_s": float(total),
        "per_iter_s": float(total / max(1, n)),
        "iters": float(n),
        "n_texts": float(len(texts)),
    }


def _bench_cold(n: int) -> dict[str, float]:
    texts = _samples()
    t = HindiTransliterator()

    vals: list[float] = []
    for _ in range(n):
        t.clear_cache()
        t0 = time.perf_counter()
        for s in texts:
            _ = t.get_suggestions_with_confidence(s)
        vals.append(time.perf_counter() - t0)

    return {
        "runs": float(n),
        "n_texts": float(len(texts)),
        "mean_s": float(statistics.mean(vals)) if vals else 0.0,
        "p50_s": float(statistics.median(vals)) if vals else 0.0,
        "min_s": float(min(vals)) if vals else 0.0,
    }


def main() -> None:
    p = argparse.ArgumentParser(description="Micro-benchmark for hindi-name-transliterator.")
    p.add_argument("--n", type=int, default=200, help="Number of benchmark iterations.")
    p.add_argument(
        "--mode",
        choices=["warm", "warm_locked", "cold"],
        default="warm",
        help="Cached suggestions, the same with a locked cache, or suggestions after clear_cache.",
    )
    args = p.parse_args()

    n = max(1, int(args.n))
    if args.mode == "cold":
        print(_bench_cold(n))
        return
    print(_bench_warm(n, thread_safe=args.mode == "warm_locked"))


if __name__ == "__main__":
    main()
