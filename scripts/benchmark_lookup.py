"""
Throughput of lookup key generation and dial-pad highlighting.

Runs a synthetic contact list through a fresh context twice: once cold, so
every name is transliterated, and once warm, so every name is a cache hit.
"""

import argparse
import random
import time
from typing import List

from namedial import NameDialConfig, NameLookupContext, TextHighlighter

CHINESE_SURNAMES = "王李张刘陈杨黄赵吴周徐孙马朱胡郭何高林罗"
CHINESE_GIVEN = "伟芳娜秀英敏静丽强磊军洋勇艳杰娟涛明超兰霞平刚桂"
WESTERN_FIRST = ["John", "Mary", "David", "Sarah", "Michael", "Lisa", "James", "Jennifer"]
WESTERN_LAST = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller"]


def generate_contacts(count: int, seed: int) -> List[str]:
    rng = random.Random(seed)
    names = []
    for _ in range(count):
        choice = rng.random()
        if choice < 0.6:
            given = "".join(rng.choice(CHINESE_GIVEN) for _ in range(rng.choice((1, 2))))
            names.append(rng.choice(CHINESE_SURNAMES) + given)
        elif choice < 0.8:
            names.append(f"{rng.choice(WESTERN_FIRST)} {rng.choice(WESTERN_LAST)}")
        else:
            names.append(f"{rng.choice(CHINESE_SURNAMES)} {rng.choice(WESTERN_FIRST)}")
    return names


def time_pass(highlighter: TextHighlighter, names: List[str], queries: List[str]) -> float:
    start = time.perf_counter()
    for name in names:
        for query in queries:
            highlighter.apply_digit_filter(name, query)
    return time.perf_counter() - start


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark dial-pad name lookup.")
    parser.add_argument("--count", type=int, default=2000, help="Number of synthetic contacts.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for the contact list.")
    parser.add_argument("--language", type=str, default="zh", help="Interpretation language.")
    args = parser.parse_args()

    names = generate_contacts(args.count, args.seed)
    queries = ["5", "54", "94", "5646", "76484"]
    config = NameDialConfig.create_default().with_language(args.language)
    highlighter = TextHighlighter(context=NameLookupContext(config))

    cold = time_pass(highlighter, names, queries)
    warm = time_pass(highlighter, names, queries)
    lookups = len(names) * len(queries)

    print(f"Contacts: {len(names)}, queries per contact: {len(queries)}")
    print(f"Cache entries after run: {highlighter.context.get_cache_info().cache_size}")
    print(f"Cold: {cold:.3f}s ({cold / lookups * 1_000_000:.1f} μs/lookup)")
    print(f"Warm: {warm:.3f}s ({warm / lookups * 1_000_000:.1f} μs/lookup)")
    print(f"Cache benefit: {cold / warm:.1f}x")


if __name__ == "__main__":
    main()
