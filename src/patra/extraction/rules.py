"""Ordered first-match rule tables.

Every classifier in this package is a tuple of `Rule` objects evaluated in
declared order. The first rule whose pattern matches anywhere in the text
decides the label; there is no scoring and no longest-match preference, so
more specific rules must be declared before generic ones.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleMatch:
    """Tagged classifier result.

    `matched` is False when no rule fired; callers apply their default
    label at the boundary instead of each table carrying one.
    """

    matched: bool = False
    label: str = ""
    group: str = ""

    def label_or(self, default: str) -> str:
        """Return the matched label, or `default` when nothing matched."""
        return self.label if self.matched else default


NO_MATCH = RuleMatch()


@dataclass(frozen=True)
class Rule:
    """A single (pattern, label) rule with an optional classification group."""

    pattern: re.Pattern
    label: str
    group: str = ""

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def rule(pattern: str, label: str, group: str = "", flags: int = re.IGNORECASE) -> Rule:
    """Compile a rule; tables are built from these at import time."""
    return Rule(re.compile(pattern, flags), label, group)


class RuleTable:
    """An immutable, ordered collection of rules."""

    def __init__(self, name: str, rules: Iterable[Rule]):
        self.name = name
        self.rules = tuple(rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def first_match(self, text: str) -> RuleMatch:
        """Return the label of the first rule matching `text`."""
        for index, candidate in enumerate(self.rules):
            if candidate.matches(text):
                logger.debug("%s rule %d matched: %s", self.name, index, candidate.label)
                return RuleMatch(True, candidate.label, candidate.group)
        return NO_MATCH
