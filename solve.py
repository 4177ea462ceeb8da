import argparse
import math
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from blueprint_parser import parse
from models import (
    TERMINAL,
    Blueprint,
    EconomyState,
    ResourceKind,
    candidates,
    upper_bound,
)

PART_ONE_MINUTES = 24
PART_TWO_MINUTES = 32
PART_TWO_BLUEPRINTS = 3


@dataclass
class Stats:
    states_visited: int = 0
    futile_hits: int = 0

    def detect_futile(self):
        self.futile_hits += 1

    def visit_node(self):
        self.states_visited += 1


@dataclass
class BestObserved:
    """Most geodes seen on any branch so far"""

    value: int = 0

    def update(self, v):
        self.value = max(self.value, v)

    def rules_out(self, bound):
        return bound < self.value


def search(
    remaining_turns: int,
    state: EconomyState,
    bp: Blueprint,
    forbidden: frozenset[ResourceKind],
    best: BestObserved,
    stats: Optional[Stats] = None,
) -> int:
    """Most geodes reachable from `state` in `remaining_turns`.

    `state` belongs to this call and is consumed by it. `forbidden` holds the
    bots the caller declined to build while waiting into this same state,
    which only holds while a single bot can be built per turn.
    """
    if stats is not None:
        stats.visit_node()

    if remaining_turns == 1:
        # A bot built now would never produce
        state.collect()
        result = state.terminal_yield()
        best.update(result)
        return result

    if best.rules_out(upper_bound(state, remaining_turns)):
        # Futility check - if it is impossible to beat the best observed score, give up
        if stats is not None:
            stats.detect_futile()
        return 0

    options = candidates(state, bp) - forbidden

    if TERMINAL in options:
        state.collect()
        state.build(bp, TERMINAL)
        result = search(remaining_turns - 1, state, bp, frozenset(), best, stats)
        best.update(result)
        return result

    result = 0
    # Most advanced bot first, so good scores turn up early and prune more.
    for kind in sorted(options, reverse=True):
        child = state.copy()
        child.collect()
        child.build(bp, kind)
        result = max(
            result, search(remaining_turns - 1, child, bp, frozenset(), best, stats)
        )
        best.update(result)

    # Performing X now is never worse than wait+X, so anything we could
    # have built here stays off the table until something else gets built.
    state.collect()
    wait_res = search(
        remaining_turns - 1, state, bp, forbidden | options, best, stats
    )

    result = max(result, wait_res)
    best.update(result)
    return result


def max_yield(bp: Blueprint, minutes: int, stats: Optional[Stats] = None) -> int:
    """Maximum geodes `bp` can crack open in `minutes`"""
    bp.check()
    if minutes < 1:
        return 0
    return search(minutes, EconomyState(), bp, frozenset(), BestObserved(), stats)


def quality_level_sum(
    blueprints: Iterable[Blueprint],
    minutes: int = PART_ONE_MINUTES,
    stats: Optional[Stats] = None,
) -> int:
    return sum(
        index * max_yield(bp, minutes, stats)
        for index, bp in enumerate(blueprints, start=1)
    )


def top_three_product(
    blueprints: Iterable[Blueprint],
    minutes: int = PART_TWO_MINUTES,
    stats: Optional[Stats] = None,
) -> int:
    first = list(blueprints)[:PART_TWO_BLUEPRINTS]
    return math.prod(max_yield(bp, minutes, stats) for bp in first)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the most geodes a set of blueprints can produce."
    )
    parser.add_argument("blueprints", help="File of blueprint records")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1: sum of quality levels, 2: product of the first three blueprints",
    )
    parser.add_argument(
        "--minutes", type=int, default=None, help="Override the time horizon"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print search statistics"
    )
    args = parser.parse_args(argv)

    try:
        blueprints = parse(args.blueprints)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if not blueprints:
        print(f"Error: no readable blueprints in {args.blueprints}", file=sys.stderr)
        return 1

    stats = Stats()
    start_time = time.process_time()
    if args.part == 1:
        minutes = PART_ONE_MINUTES if args.minutes is None else args.minutes
        answer = quality_level_sum(blueprints, minutes, stats)
    else:
        minutes = PART_TWO_MINUTES if args.minutes is None else args.minutes
        answer = top_three_product(blueprints, minutes, stats)

    print("Max Steps: ", minutes)
    print("Solution: ", answer)
    if args.stats:
        print(f"[*] Duration: {time.process_time() - start_time:g} seconds")
        print(f"[*] Num States Visited: {stats.states_visited}")
        print(f"[*] Num Futile Hits: {stats.futile_hits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
