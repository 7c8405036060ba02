# marksportal/utils/reports.py
SECTION_ALL = "all"


def summarize(category_stats):
    totals = {"total": 0, "pass": 0, "fail": 0}
    for row in category_stats:
        totals["total"] += row["total"]
        totals["pass"] += row["pass"]
        totals["fail"] += row["fail"]
    return totals


def pass_percentage(totals):
    """Pass rate as a two-decimal string ("30.00"), or 0 when nothing was marked."""
    if totals["total"] <= 0:
        return 0
    return f"{totals['pass'] / totals['total'] * 100:.2f}"


def build_performance_report(category_stats):
    totals = summarize(category_stats)
    return {
        "categoryStats": category_stats,
        "totals": totals,
        "passPercentage": pass_percentage(totals),
    }
