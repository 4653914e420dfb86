"""Access Report - Report output"""

import sys
from typing import Dict, List, Tuple

from rich.console import Console

from .patterns import (
    COMPLETION_MESSAGE, NO_FAILURES_MESSAGE, NO_TRENDS_MESSAGE,
    REPORT_TITLE, SECTION_TITLES,
)


def _failure_day_lines(days: List[Dict]) -> List[str]:
    if not days:
        return [NO_FAILURES_MESSAGE]
    return [f"{d['day']}: {d['failures']} failures" for d in days]


def build_sections(report: Dict) -> List[Tuple[str, List[str]]]:
    """(heading, body lines) for each of the eleven sections, in order"""
    counts = report['request_counts']
    unique = report['unique_ips']
    failures = report['failure_requests']
    top = report['top_user']
    daily = report['daily_averages']
    by_method = report['top_user_by_method']
    patterns = report['failure_patterns']

    bodies = [
        [
            f"Total Requests: {counts['total']}",
            f"GET Requests: {counts['get']}",
            f"POST Requests: {counts['post']}",
        ],
        [
            f"Total Unique IPs: {unique['unique_count']}",
            "",
            "GET and POST requests per IP:",
        ] + [f"{ip}: GET={c['get']}, POST={c['post']}" for ip, c in unique['per_ip'].items()],
        [
            f"Failed Requests: {failures['failed']}",
            f"Failure Percentage: {failures['failure_percentage']:.2f}%",
        ],
        [f"Most Active IP: {top['ip']} ({top['requests']} requests)"],
        [
            f"Number of Days: {daily['days']}",
            f"Average Requests per Day: {daily['average_per_day']:.2f}",
        ],
        _failure_day_lines(report['top_failure_days']),
        [f"Hour {h['hour']:02d}: {h['requests']} requests" for h in report['requests_by_hour']],
        [f"Hour {t['hour']:02d}: {t['direction']} (from {t['previous']} to {t['current']} requests)"
         for t in report['hourly_trend']] or [NO_TRENDS_MESSAGE],
        [f"Status {s['status']}: {s['requests']} requests ({s['percentage']:.2f}%)"
         for s in report['status_codes']],
        [
            f"Most Active GET IP: {by_method['GET']['ip']} ({by_method['GET']['requests']} requests)",
            f"Most Active POST IP: {by_method['POST']['ip']} ({by_method['POST']['requests']} requests)",
        ],
        ["Failures by Hour:"]
        + ([f"Hour {h['hour']:02d}: {h['failures']} failures ({h['percentage']:.2f}% of total failures)"
            for h in patterns['by_hour']] or [NO_FAILURES_MESSAGE])
        + ["", "Top 5 Days with Failures (repeated for reference):"]
        + _failure_day_lines(patterns['top_failure_days']),
    ]

    return [(f"{n}. {title}", body)
            for n, (title, body) in enumerate(zip(SECTION_TITLES, bodies), 1)]


def render_report(report: Dict) -> str:
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE)]
    for heading, body in build_sections(report):
        lines += ["", heading, "-" * len(heading)] + body
    lines += ["", COMPLETION_MESSAGE]
    return "\n".join(lines) + "\n"


def print_report(report: Dict, console: Console = None):
    if console is None:
        sys.stdout.write(render_report(report))
        return

    console.print(REPORT_TITLE, style="bold cyan", markup=False, highlight=False, emoji=False)
    console.print("=" * len(REPORT_TITLE), style="cyan")

    for heading, body in build_sections(report):
        console.print()
        console.print(heading, style="bold", markup=False, highlight=False, emoji=False)
        console.print("-" * len(heading), style="cyan")
        for line in body:
            console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    console.print()
    console.print(COMPLETION_MESSAGE, style="green", markup=False, highlight=False, emoji=False)
