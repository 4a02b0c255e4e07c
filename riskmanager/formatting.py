"""Display formatting and static advisory content."""

BEST_PRACTICES = [
    "Always define your risk per trade before entering a position.",
    "Stick to your daily maximum number of trades.",
    "Use proper risk:reward ratio for all trades.",
    "Avoid revenge trading after a loss.",
    "Keep a trading journal for each trade.",
    "Follow your SL and TP rules strictly.",
    "Focus on quality setups rather than quantity.",
    "Stay informed about major market news and events.",
    "Take breaks to avoid emotional trading.",
    "Continuously review and learn from past trades.",
]


def format_amount(value: float) -> str:
    """Format a currency amount to 2 decimal places."""
    return f"{value:.2f}"


def format_signed_amount(value: float, sign: str) -> str:
    """Format a currency amount with a leading sign.

    Args:
        value: Amount to format (its own sign is not shown).
        sign: "+" for gains, "-" for losses.
    """
    return f"{sign}{abs(value):.2f}"


def format_pips(value: float) -> str:
    """Format a pip count to 1 decimal place."""
    return f"{value:.1f}"


def format_price(value: float) -> str:
    """Format a price to 5 decimal places; unset prices show as 0."""
    if not value:
        return "0"
    return f"{value:.5f}"


def format_suggested_trades(value: int) -> str:
    """Format the suggested trade cap; 0 means there is no suggestion."""
    return str(value) if value > 0 else "n/a"
