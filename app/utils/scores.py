from typing import Iterable

from app.storage import Record


def percentage(test: Record) -> float:
    """Score of one test as a percentage: mark / out_of * 100."""
    return test["mark"] / test["out_of"] * 100


def average_percentage(tests: Iterable[Record]) -> float:
    scores = [percentage(test) for test in tests]
    return round(sum(scores) / len(scores), 2)
