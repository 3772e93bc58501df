"""Small string exercises: cricket score cards and character counting."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_RUN_VALUES = {str(runs): runs for runs in range(1, 7)}
_WICKET = "W"


@dataclass(frozen=True)
class InningsSummary:
    """Balls bowled, runs scored and wickets taken in one innings."""

    balls: int
    runs: int
    wickets: int

    @property
    def overs(self) -> float:
        """Overs in cricket notation: whole overs plus balls as tenths."""
        return self.balls // 6 + (self.balls % 6) / 10

    def __str__(self) -> str:
        overs = self.overs
        over_word = "Overs" if overs > 1.0 else "Over"
        run_word = "Runs" if self.runs > 1 else "Run"
        wicket_word = "Wickets." if self.wickets > 1 else "Wicket."
        return f"{overs:.1f} {over_word} {self.runs} {run_word} {self.wickets} {wicket_word}"


@dataclass(frozen=True)
class CharacterCounts:
    """Counts of ASCII capital letters, small letters and digits."""

    capital: int
    small: int
    digit: int


def innings_summary(balls: str) -> InningsSummary:
    """Summarise a ball-by-ball record where 1-6 are runs and W is a wicket."""
    runs = sum(_RUN_VALUES.get(ball, 0) for ball in balls)
    wickets = balls.count(_WICKET)
    return InningsSummary(balls=len(balls), runs=runs, wickets=wickets)


def count_characters(text: str) -> CharacterCounts:
    """Count ASCII capital letters, small letters and digits in the text."""
    return CharacterCounts(
        capital=sum("A" <= ch <= "Z" for ch in text),
        small=sum("a" <= ch <= "z" for ch in text),
        digit=sum("0" <= ch <= "9" for ch in text),
    )


def characters_of(text: str) -> list[str]:
    """The characters of the text, one by one."""
    return list(text)


def repeat_per_character(word: str) -> list[str]:
    """The whole word repeated once for each of its characters."""
    return [word for _ in word]


def concatenate(prefix: str, suffix: str) -> str:
    """Join two strings end to end."""
    return prefix + suffix


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many innings records from stdin; print summaries."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    try:
        count = int(tokens[0])
    except ValueError:
        print("expected the number of innings first", file=sys.stderr)
        return 1
    for record in tokens[1 : 1 + max(count, 0)]:
        print(innings_summary(record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())