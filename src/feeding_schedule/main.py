"""Run a single schedule initialization pass."""

import logging

from feeding_schedule.app_logging import configure_logging
from feeding_schedule.containers import AppContainer, build_container
from feeding_schedule.domain.schedule import ScheduleRunReport


def main(container: AppContainer | None = None) -> ScheduleRunReport:
    """Ensure the config, current month and next month are stored."""
    configure_logging()
    resolved = container or build_container()
    report = resolved.schedule_service.initialize()
    logging.getLogger(__name__).info("Schedule initialization finished")
    print(f"Feeding Schedule: {report.summary()}")
    return report


if __name__ == "__main__":
    main()
