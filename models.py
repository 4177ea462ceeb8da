from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from typing import NamedTuple


class ResourceKind(IntEnum):
    """Resources in production order. The ordinal indexes every cost and stock list."""

    ORE = 0
    CLAY = 1
    OBSIDIAN = 2
    GEODE = 3

    @classmethod
    def from_name(cls, name: str) -> "ResourceKind":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"{name!r} is not a valid resource") from None


BASE = ResourceKind.ORE
TERMINAL = ResourceKind.GEODE
NUM_KINDS = len(ResourceKind)


class Blueprint(NamedTuple):
    """Blueprint of the bots"""

    # Each cost is a tuple of (ore, clay, obsidian, geode) per.
    ore: tuple[int, ...] = (4, 0, 0, 0)
    clay: tuple[int, ...] = (2, 0, 0, 0)
    obsidian: tuple[int, ...] = (3, 14, 0, 0)
    geode: tuple[int, ...] = (2, 0, 7, 0)

    id: int = 0

    @classmethod
    def from_costs(cls, costs: dict, id: int = 0) -> "Blueprint":
        """Build from {robot kind: {resource kind: amount}}; absent resources cost nothing."""
        for robot in costs:
            assert isinstance(robot, ResourceKind), f"{robot!r} robot is not in the catalog"

        per_robot = []
        for robot in ResourceKind:
            cost = [0] * NUM_KINDS
            for kind, amount in costs.get(robot, {}).items():
                assert isinstance(kind, ResourceKind), f"{kind!r} is not in the catalog"
                cost[kind] = amount
            per_robot.append(tuple(cost))
        return cls(*per_robot, id=id)

    def cost(self, kind: ResourceKind) -> tuple[int, ...]:
        return self[kind]

    def check(self):
        for kind in ResourceKind:
            cost = self.cost(kind)
            assert len(cost) == NUM_KINDS, f"{kind.name} cost {cost} does not match the catalog"
            assert all(amount >= 0 for amount in cost), f"{kind.name} cost {cost} is negative"

    @lru_cache
    def max_needed(self, kind: ResourceKind) -> int:
        """Most of `kind` any single recipe asks for"""
        return max(self.cost(robot)[kind] for robot in ResourceKind)


@dataclass
class EconomyState:
    robots: list[int] = field(default_factory=lambda: [1, 0, 0, 0])
    stock: list[int] = field(default_factory=lambda: [0] * NUM_KINDS)

    def copy(self) -> "EconomyState":
        return EconomyState(robots=self.robots.copy(), stock=self.stock.copy())

    def collect(self):
        for kind in ResourceKind:
            self.stock[kind] += self.robots[kind]

    def can_afford(self, cost: tuple[int, ...]) -> bool:
        return all(self.stock[kind] >= amount for kind, amount in zip(ResourceKind, cost))

    def build(self, bp: Blueprint, kind: ResourceKind) -> bool:
        cost = bp.cost(kind)
        if not self.can_afford(cost):
            return False

        for res, amount in zip(ResourceKind, cost):
            self.stock[res] -= amount
        self.robots[kind] += 1
        return True

    def terminal_yield(self) -> int:
        return self.stock[TERMINAL]


def affordable(state: EconomyState, bp: Blueprint) -> set[ResourceKind]:
    return {kind for kind in ResourceKind if state.can_afford(bp.cost(kind))}


def needed(state: EconomyState, bp: Blueprint) -> set[ResourceKind]:
    # Owning max_needed robots of a kind already pays for any recipe every turn,
    # so more of them can't help.
    return {kind for kind in ResourceKind if state.robots[kind] < bp.max_needed(kind)}


def candidates(state: EconomyState, bp: Blueprint) -> frozenset[ResourceKind]:
    """Robot kinds worth building next from `state`"""
    can_afford = affordable(state, bp)
    if TERMINAL in can_afford:
        return frozenset((TERMINAL,))
    return frozenset(can_afford & needed(state, bp))


def upper_bound(state: EconomyState, remaining_turns: int) -> int:
    """Estimate the upper-bound on the geodes achievable from this state

    Assumes a new geode bot on every remaining turn but the last, whatever it costs.
    """
    return (
        state.terminal_yield()
        + state.robots[TERMINAL] * remaining_turns
        + (remaining_turns - 1) * remaining_turns // 2
    )
