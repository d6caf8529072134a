"""Example: today's effective schedule and this week's totals for a few employees.

Usage: python -m examples.example_usage <company_id> <employee_id> [<employee_id> ...]
"""

import sys

from src.worktime.worktime.common.datetime_utils import now_local
from src.worktime.worktime.container import build_container


def main(argv):
    company_id, employee_ids = argv[0], argv[1:]
    container = build_container()
    now = now_local()

    for employee_id in employee_ids:
        effective = container.resolver.resolve(employee_id, company_id, now.date())
        name = effective.schedule.name if effective.schedule else "-"
        print(f"{employee_id}: {effective.kind.value} {name}")

    reports = container.stats_reporter.period_totals(
        employee_ids=employee_ids, now=now, week_start=container.report_week_start
    )
    week = reports["week"]
    for row in week.employees:
        print(f"{row.employee_id}: {row.total_hours} this week ({row.malformed_count} malformed)")
    for failure in week.failures:
        print(f"{failure.employee_id}: failed ({failure.error})")


if __name__ == "__main__":
    main(sys.argv[1:])
