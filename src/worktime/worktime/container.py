from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.factory import PunctualityStrategyFactory
from .attendance.service import PunctualityService
from .common.logging_utils import setup_json_logging
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_REGULAR_DAY_HOURS, DEFAULT_WORK_DAY_ROLLOVER_HOUR
from .core.enums import WeekStart
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.resolver import EffectiveScheduleResolver
from .schedules.service import ScheduleSummaryService
from .stats.calculator.standard_calculator import StandardOvertimeCalculator
from .stats.service import StatsReporter
from .time_entries.aggregator import TimeEntryAggregator
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository

logger = logging.getLogger("worktime.container")


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    schedules_repo: MySQLScheduleRepository
    time_entries_repo: MySQLTimeEntryRepository

    resolver: EffectiveScheduleResolver
    aggregator: TimeEntryAggregator
    stats_reporter: StatsReporter
    punctuality_service: PunctualityService
    schedule_summary_service: ScheduleSummaryService

    report_week_start: WeekStart


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    """Wire MySQL repositories and services from a settings module.

    No connection is opened here; each repository read opens its own.
    """

    settings = settings or load_settings()

    if getattr(settings, "LOG_JSON", False):
        setup_json_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
    schedules_repo = MySQLScheduleRepository(conn)
    time_entries_repo = MySQLTimeEntryRepository(conn)

    resolver = EffectiveScheduleResolver.from_repositories(
        overrides=schedules_repo,
        assignments=schedules_repo,
        schedules=schedules_repo,
        week_start=WeekStart(getattr(settings, "SCHEDULE_WEEK_START", WeekStart.SUNDAY.value)),
    )
    aggregator = TimeEntryAggregator()
    stats_reporter = StatsReporter(
        time_entries_repo,
        aggregator=aggregator,
        calculator=StandardOvertimeCalculator(getattr(settings, "REGULAR_DAY_HOURS", DEFAULT_REGULAR_DAY_HOURS)),
        rollover_hour=getattr(settings, "WORK_DAY_ROLLOVER_HOUR", DEFAULT_WORK_DAY_ROLLOVER_HOUR),
    )
    punctuality_service = PunctualityService(
        resolver,
        strategy_factory=PunctualityStrategyFactory(),
        grace_minutes=getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES),
    )
    schedule_summary_service = ScheduleSummaryService(resolver)

    logger.info(
        "container_ready",
        extra={
            "settings": settings.__name__,
            "db": f"{conn.config.user}@{conn.config.host}:{conn.config.port}/{conn.config.database}",
            "schedule_week_start": resolver.week_start.value,
        },
    )

    return Container(
        conn=conn,
        schedules_repo=schedules_repo,
        time_entries_repo=time_entries_repo,
        resolver=resolver,
        aggregator=aggregator,
        stats_reporter=stats_reporter,
        punctuality_service=punctuality_service,
        schedule_summary_service=schedule_summary_service,
        report_week_start=WeekStart(getattr(settings, "REPORT_WEEK_START", WeekStart.MONDAY.value)),
    )
