"""
Pattern code -> blending program.

A rule is a tuple of N*N slots in row-major sub-pixel order. A slot is a
Mix, or a Choice between two Mixes decided by re-testing two neighbors
the pattern code does not relate to each other (a diagonal tie-break).

The 3x rules are the literal hq3x table. The 2x and 4x tables are
projections of it: each of their sub-pixels reuses the 3x slot covering
the same region of the block.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np

from .classify import Classifier, Thresholds
from .color import Mix
from .hq3x_table import HQ3X_BODIES

SCALES = (2, 3, 4)

# Sub-pixel row/column of the 3x block that each row/column maps to.
_PROJECTIONS = {
    2: (0, 2),
    3: (0, 1, 2),
    4: (0, 1, 1, 2),
}


@dataclass(frozen=True)
class Choice:
    """Use ``if_different`` when window colors ``pair`` differ, else ``if_same``."""

    pair: tuple[int, int]
    if_different: Mix
    if_same: Mix

    def __post_init__(self):
        if 4 in self.pair or len(self.pair) != 2:
            raise ValueError(f"Tie-break pair {self.pair} must name two neighbors")

    def __str__(self) -> str:
        return f"?{self.pair[0]},{self.pair[1]} {self.if_different} | {self.if_same}"


Slot = Union[Mix, Choice]
Rule = tuple[Slot, ...]


def parse_mix(text: str) -> Mix:
    """Parse ``"4"``, ``"4,3@3:1"`` or ``"4,3,1@2:1:1"``."""
    if "@" in text:
        indices, weights = text.split("@")
        return Mix(
            tuple(int(i) for i in indices.split(",")),
            tuple(int(w) for w in weights.split(":")),
        )
    return Mix((int(text),), (1,))


def _parse_steps(text: str, scale: int) -> list[tuple[int, Mix]]:
    steps = []
    for token in text.split():
        position, expr = token.split("=")
        if len(position) != 2 or int(position[0]) >= scale or int(position[1]) >= scale:
            raise ValueError(f"Sub-pixel {position} outside a {scale}x{scale} block")
        steps.append((int(position[0]) * scale + int(position[1]), parse_mix(expr)))
    return steps


def compile_body(lines: Iterable[str], scale: int = 3) -> Rule:
    """Turn the textual steps of a rule body into a Rule."""
    slots: list = [None] * (scale * scale)

    def assign(slot, value):
        if slots[slot] is not None:
            raise ValueError(f"Sub-pixel {divmod(slot, scale)} assigned twice")
        slots[slot] = value

    for line in lines:
        line = line.strip()
        if line.startswith("?"):
            head, rest = line[1:].split(" ", 1)
            pair = tuple(int(i) for i in head.split(","))
            different, same = (_parse_steps(part, scale) for part in rest.split("|"))
            if [s for s, _ in different] != [s for s, _ in same]:
                raise ValueError(f"Branches of {line!r} assign different sub-pixels")
            for (slot, if_different), (_, if_same) in zip(different, same):
                assign(slot, Choice(pair, if_different, if_same))
        else:
            for slot, value in _parse_steps(line, scale):
                assign(slot, value)

    missing = [divmod(i, scale) for i, s in enumerate(slots) if s is None]
    if missing:
        raise ValueError(f"Rule body leaves sub-pixels {missing} unassigned")
    return tuple(slots)


def evaluate(rule: Rule, window: Sequence, thresholds: Thresholds, classifier: Classifier) -> list:
    """
    Run a rule over a window.

    ``window`` holds 9 colors or 9 equally shaped arrays; the result has
    one entry per slot, of the same kind. Each tie-break pair is tested
    once.
    """
    tests = {}
    values = []
    for slot in rule:
        if isinstance(slot, Choice):
            if slot.pair not in tests:
                a, b = slot.pair
                tests[slot.pair] = classifier.is_different(window[a], window[b], thresholds)
            differs = tests[slot.pair]
            if isinstance(differs, np.ndarray):
                values.append(np.where(differs, slot.if_different.apply(window), slot.if_same.apply(window)))
            elif differs:
                values.append(slot.if_different.apply(window))
            else:
                values.append(slot.if_same.apply(window))
        else:
            values.append(slot.apply(window))
    return values


class RuleTable:
    """All 256 rules for one scale factor."""

    def __init__(self, scale: int, rules: Sequence[Rule]):
        if len(rules) != 256:
            raise ValueError(f"Rule table needs 256 entries, got {len(rules)}")
        for code, rule in enumerate(rules):
            if rule is None:
                raise ValueError(f"No rule for pattern code {code}")
            if len(rule) != scale * scale:
                raise ValueError(f"Rule for code {code} has {len(rule)} slots, expected {scale * scale}")
        self.scale = scale
        self.rules = tuple(rules)

    @classmethod
    def from_bodies(cls, scale: int, bodies: Iterable[tuple[Sequence[int], Sequence[str]]]) -> "RuleTable":
        rules: list = [None] * 256
        for codes, lines in bodies:
            rule = compile_body(lines, scale)
            for code in codes:
                if not 0 <= code <= 255:
                    raise ValueError(f"Pattern code {code} out of range")
                if rules[code] is not None:
                    raise ValueError(f"Pattern code {code} defined twice")
                rules[code] = rule
        return cls(scale, rules)

    def project(self, scale: int) -> "RuleTable":
        """Derive a table for another scale from this 3x table."""
        if self.scale != 3:
            raise ValueError("Only a 3x table can be projected")
        mapping = _PROJECTIONS[scale]
        slots = [r * 3 + c for r in mapping for c in mapping]
        return RuleTable(scale, [tuple(rule[s] for s in slots) for rule in self.rules])

    def __getitem__(self, code: int) -> Rule:
        return self.rules[code]

    def __len__(self) -> int:
        return len(self.rules)

    def apply(self, code: int, window: Sequence[int], thresholds: Thresholds, classifier: Classifier) -> list[list[int]]:
        """Output block (scale rows of scale colors) for a single window."""
        values = evaluate(self.rules[code], window, thresholds, classifier)
        n = self.scale
        return [values[row * n:(row + 1) * n] for row in range(n)]

    def apply_planes(self, code: int, planes: Sequence[np.ndarray], thresholds: Thresholds, classifier: Classifier) -> list[np.ndarray]:
        """Slot values for many windows sharing ``code`` at once."""
        return evaluate(self.rules[code], planes, thresholds, classifier)


HQ3X = RuleTable.from_bodies(3, HQ3X_BODIES)

TABLES = {
    2: HQ3X.project(2),
    3: HQ3X,
    4: HQ3X.project(4),
}


def get_table(scale: int) -> RuleTable:
    try:
        return TABLES[scale]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported scale {scale!r}, expected one of {SCALES}") from None
