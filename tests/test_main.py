"""Tests for main module."""

from feeding_schedule.main import main


def test_main_runs_single_pass(container, schedule_store, capsys) -> None:
    report = main(container)

    captured = capsys.readouterr()
    assert "Feeding Schedule" in captured.out
    assert "generated months: 2026-10, 2026-11" in captured.out
    assert report.config_created is True
    assert len(schedule_store.slot_batches) == 2


def test_main_reports_nothing_generated(container, capsys) -> None:
    main(container)
    capsys.readouterr()

    main(container)

    assert "generated months: none" in capsys.readouterr().out
