from typing import Iterable, List, Union

from ..models import Balance

Pair = List[Union[str, float]]


def to_pairs(balances: Iterable[Balance]) -> List[Pair]:
    """[currency, value] per balance, upstream order preserved."""
    return [[b.currency, b.total_worth.value] for b in balances]


def to_text(balances: Iterable[Balance]) -> str:
    return "".join(f"{b.currency}: {b.total_worth.value:.2f}\n" for b in balances)
