"""1D elementary cellular automaton rule engine using Wolfram rule numbers."""

import re
import numpy as np
from dataclasses import dataclass
from typing import Tuple, Union

# Neighborhood patterns in Wolfram order, 111 down to 000
PATTERNS = ["111", "110", "101", "100", "011", "010", "001", "000"]


class InvalidState(RuntimeError):
    """A neighborhood value outside 0-7 reached the rule lookup."""


@dataclass(frozen=True)
class Rule:
    """Elementary CA rule as a Wolfram number (e.g., 30, 110, 250)."""
    number: int

    def __post_init__(self):
        if not 0 <= self.number <= 255:
            raise ValueError(
                f"{self.number} is not within the allowed range, "
                "please enter a number between 0-255."
            )

    @classmethod
    def from_string(cls, rule_str: str) -> "Rule":
        """Parse rule from string like '30', 'R30', 'rule 30', '0b00011110' or '0x1e'."""
        text = rule_str.strip().lower().replace(" ", "")
        text = re.sub(r"^(rule|r)", "", text)

        try:
            if text.startswith("0b"):
                number = int(text[2:], 2)
            elif text.startswith("0x"):
                number = int(text[2:], 16)
            else:
                number = int(text)
        except ValueError:
            raise ValueError(f"'{rule_str}' is not a rule number. Please supply a rule.") from None

        return cls(number=number)

    def to_string(self) -> str:
        """Convert to short notation like 'R30'."""
        return f"R{self.number}"

    def bits(self) -> str:
        """8-bit binary form, most significant (pattern 111) first."""
        return f"{self.number:08b}"

    def table(self) -> np.ndarray:
        """Lookup table indexed by neighborhood value."""
        table = np.array([cell_state(v, self.number) for v in range(8)], dtype=bool)
        table.flags.writeable = False
        return table

    def wolfram_table(self) -> Tuple[str, str]:
        """Patterns 111..000 on one line, the output bit under each on the next."""
        top = "   ".join(PATTERNS)
        bottom = "   ".join(f" {b} " for b in self.bits())
        return top, bottom

    def lambda_parameter(self) -> float:
        """Langton's lambda: fraction of the 8 neighborhoods that map to alive."""
        return bin(self.number).count("1") / 8.0

    def __int__(self):
        return self.number


RuleLike = Union[Rule, int]


def left_of(row: np.ndarray, index: int) -> int:
    """Left neighbor bit; the first cell wraps around to the last."""
    if index == 0:
        return int(row[-1])
    return int(row[index - 1])


def right_of(row: np.ndarray, index: int) -> int:
    """Right neighbor bit; past the last cell is always 0."""
    if index == len(row) - 1:
        return 0
    return int(row[index + 1])


def neighborhood_value(row: np.ndarray, index: int) -> int:
    """Encode a cell and its neighbors as left*4 + self*2 + right."""
    return (left_of(row, index) << 2) | (int(row[index]) << 1) | right_of(row, index)


def neighborhood_values(row: np.ndarray) -> np.ndarray:
    """Vectorized neighborhood_value for every cell of a row."""
    cells = np.asarray(row, dtype=np.uint8)
    left = np.roll(cells, 1)
    right = np.zeros_like(cells)
    right[:-1] = cells[1:]
    return (left << 2) | (cells << 1) | right


def cell_state(value: int, rule: RuleLike) -> bool:
    """Look up the next state for a neighborhood value (bit `value` of the rule)."""
    if not 0 <= value <= 7:
        raise InvalidState(f"{value} is not a valid neighborhood value")
    return (int(rule) >> value) & 1 == 1


def next_row(row: np.ndarray, rule: RuleLike) -> np.ndarray:
    """Generate the next row from the current one. Never modifies `row`."""
    values = neighborhood_values(row)
    if len(values) and values.max() > 7:
        raise InvalidState(f"{values.max()} is not a valid neighborhood value")

    if not isinstance(rule, Rule):
        rule = Rule(rule)
    nxt = rule.table()[values]
    nxt.flags.writeable = False
    return nxt


# Some well-known rules
RULE_30 = Rule(30)
RULE_90 = Rule(90)
RULE_110 = Rule(110)
RULE_184 = Rule(184)
RULE_250 = Rule(250)
