from .balances import to_pairs, to_text

__all__ = ["to_pairs", "to_text"]
