"""Budget governor reporting."""


def get_budget_status() -> str:
    """Return the current budget status line."""
    spent = 0.0
    limit = 20.0
    return f"[Budget: ${spent:.2f} / ${limit:.2f}]"