"""Summary report for a bar generation run."""

BANNER = "=" * 31


def format_report(bar_count: int, total_length: float) -> str:
    """Format the bar count and total length as a summary block.

    Examples:
        >>> print(format_report(4, 2000.0))
        ===============================
        Bars created : 4
        Total length : 2000.00
        ===============================
    """
    return "\n".join(
        [
            BANNER,
            f"Bars created : {bar_count}",
            f"Total length : {total_length:.2f}",
            BANNER,
        ]
    )
