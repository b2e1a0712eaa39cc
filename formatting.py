from typing import Protocol

from constants import MAN, OKU


class AmountFormatter(Protocol):
    """Anything that can turn a currency amount into display text."""

    def format(self, amount: float) -> str: ...


class YenFormatter:
    """
    Formats yen amounts using the base-10,000 grouping convention.

    Amounts of at least 1 oku (1e8) are shown in 億円 with two decimals, amounts of
    at least 1 man (1e4) in 万円 with one decimal, and anything smaller in plain 円.
    """

    def format(self, amount: float) -> str:
        if amount >= OKU:
            return f"{amount / OKU:.2f}億円"
        elif amount >= MAN:
            return f"{amount / MAN:.1f}万円"
        return f"{amount:.0f}円"


class DollarFormatter:
    """Plain dollar amounts with thousands separators."""

    def format(self, amount: float) -> str:
        return f"${amount:,.0f}"


_DEFAULT_FORMATTER = YenFormatter()


def format_yen(amount: float) -> str:
    return _DEFAULT_FORMATTER.format(amount)
