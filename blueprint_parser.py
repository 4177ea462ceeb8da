import os
import re
import sys
from pathlib import Path

from models import Blueprint, ResourceKind

FILE_PATH = str | bytes | os.PathLike

HEADER_PATTERN = re.compile(r"Blueprint\s+(\d+):\s*(.*)", re.DOTALL)
ROBOT_PATTERN = re.compile(r"Each\s+(\w+)\s+robot\s+costs\s+(.+)", re.DOTALL)
COST_PATTERN = re.compile(r"(\d+)\s+(\w+)")


def parse_blueprint(text: str) -> Blueprint:
    """Parse a single "Blueprint N: Each X robot costs ..." record.

    Raises ValueError if the record is not a complete, well-formed blueprint.
    """
    match = HEADER_PATTERN.fullmatch(text.strip())
    if not match:
        raise ValueError(f"not a blueprint: {text!r}")
    id = int(match.group(1))

    # Each sentence is one bot's total cost, "Each X robot costs 2 A and 10 B"
    sentences = filter(None, (s.strip() for s in match.group(2).split(".")))

    costs = {}
    for sentence in sentences:
        robot_match = ROBOT_PATTERN.fullmatch(sentence)
        if not robot_match:
            raise ValueError(f"blueprint {id}: can't read {sentence!r}")
        robot = ResourceKind.from_name(robot_match.group(1))
        if robot in costs:
            raise ValueError(f"blueprint {id}: {robot.name.lower()} robot defined twice")

        cost = {}
        for clause in re.split(r"\s+and\s+", robot_match.group(2).strip()):
            cost_match = COST_PATTERN.fullmatch(clause.strip())
            if not cost_match:
                raise ValueError(f"blueprint {id}: can't read cost {clause!r}")
            amount = int(cost_match.group(1))
            if amount <= 0:
                raise ValueError(f"blueprint {id}: cost {clause!r} must be positive")
            kind = ResourceKind.from_name(cost_match.group(2))
            cost[kind] = cost.get(kind, 0) + amount
        costs[robot] = cost

    missing = [kind.name.lower() for kind in ResourceKind if kind not in costs]
    if missing:
        raise ValueError(f"blueprint {id}: no recipe for {', '.join(missing)} robot")

    return Blueprint.from_costs(costs, id=id)


def parse_text(text: str) -> list[Blueprint]:
    """Parse every blueprint in `text`, skipping the ones that can't be read"""
    # Records may wrap over several lines, so split on the header instead of newlines
    records = filter(None, (r.strip() for r in re.split(r"(?=Blueprint\s)", text)))

    blueprints = []
    for record in records:
        try:
            blueprints.append(parse_blueprint(record))
        except ValueError as e:
            print(f"Skipping unreadable blueprint: {e}", file=sys.stderr)
    return blueprints


def parse(txt_file: FILE_PATH) -> list[Blueprint]:
    pth = Path(os.fsdecode(txt_file))
    return parse_text(pth.read_text(encoding="utf-8"))


if __name__ == "__main__":
    for bp in parse(sys.argv[1] if len(sys.argv) > 1 else "./blueprints.txt"):
        print(bp)
