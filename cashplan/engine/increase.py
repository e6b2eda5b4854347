from __future__ import annotations


def apply_increase(base_amount: float, increase_type: str, increase_rate: float, years_elapsed: int) -> float:
    """Grow ``base_amount`` by a percent (compounded) or flat annual increase."""
    if years_elapsed == 0:
        return base_amount
    if increase_type == "percent":
        return base_amount * (1.0 + increase_rate / 100.0) ** years_elapsed
    return base_amount + increase_rate * years_elapsed
