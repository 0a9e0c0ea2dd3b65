#!/usr/bin/env python3
from __future__ import annotations

import argparse
import time
from collections.abc import Callable

from pybase32 import decode, encode


def _bench(fn: Callable[[bytes], object], data: bytes, iterations: int) -> tuple[float, float]:
    start = time.perf_counter_ns()
    for _ in range(iterations):
        fn(data)
    elapsed = time.perf_counter_ns() - start

    ns_per_op = elapsed / iterations
    mb_per_s = (len(data) * iterations) / (elapsed / 1e9) / 1e6 if elapsed else float("inf")
    return ns_per_op, mb_per_s


def main() -> int:
    ap = argparse.ArgumentParser(description="Benchmark pybase32 encode/decode throughput.")
    ap.add_argument("--size", type=int, default=5, help="encode input size in bytes")
    ap.add_argument("--iterations", type=int, default=100_000)
    args = ap.parse_args()

    if args.size <= 0 or args.iterations <= 0:
        raise SystemExit("--size and --iterations must be > 0")

    raw = bytes(args.size)
    # One 8-symbol block per 5 input bytes, rounded up.
    text = b"ABCDEFGH" * -(-args.size // 5)

    for name, fn, data in (("encode", encode, raw), ("decode", decode, text)):
        ns_per_op, mb_per_s = _bench(fn, data, args.iterations)
        print(f"{name}: {len(data)} bytes  {ns_per_op:,.0f} ns/op  {mb_per_s:,.2f} MB/s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
