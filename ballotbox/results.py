from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence


@dataclass
class OptionResult:
    index: int
    option: str
    votes: int
    percentage: float


@dataclass
class ResultSummary:
    total: int
    rows: List[OptionResult] = field(default_factory=list)


def tally(option_indices: Iterable[int]) -> Dict[int, int]:
    """Count votes per option index. Options nobody picked are absent."""
    return dict(Counter(option_indices))


def total_votes(counts: Mapping[int, int]) -> int:
    return sum(counts.values())


def percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


def summarize(options: Sequence[str], counts: Mapping[int, int]) -> ResultSummary:
    """Per-option rows ordered by descending votes.

    ``sorted`` is stable, so options with equal votes keep their original
    order. Counts for indices outside ``options`` are ignored in the rows but
    still contribute to the total.
    """
    total = total_votes(counts)
    rows = [
        OptionResult(index=i, option=option, votes=counts.get(i, 0), percentage=percentage(counts.get(i, 0), total))
        for i, option in enumerate(options)
    ]
    rows = sorted(rows, key=lambda r: r.votes, reverse=True)
    return ResultSummary(total=total, rows=rows)
