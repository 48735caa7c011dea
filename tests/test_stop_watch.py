import itertools
import logging
import time

from meshkit.stop_watch import StopWatch


def _fake_clock(monkeypatch, values):
    ticks = iter(values)
    monkeypatch.setattr(time, "perf_counter", lambda: next(ticks))


def test_elapsed_is_reported_in_milliseconds(monkeypatch):
    _fake_clock(monkeypatch, [1.0, 3.0])
    watch = StopWatch()
    watch.start()
    watch.stop()
    assert watch.elapsed() == 2000.0


def test_stop_returns_the_watch(monkeypatch):
    _fake_clock(monkeypatch, itertools.count())
    watch = StopWatch()
    watch.start()
    assert watch.stop() is watch


def test_resume_accumulates(monkeypatch):
    _fake_clock(monkeypatch, [0.0, 1.0, 5.0, 6.0])
    watch = StopWatch()
    watch.start()
    first = watch.stop().elapsed()
    watch.resume()
    total = watch.stop().elapsed()
    assert total == 2 * first


def test_start_resets_accumulated_time(monkeypatch):
    _fake_clock(monkeypatch, [0.0, 1.0, 5.0, 6.0])
    watch = StopWatch()
    watch.start()
    first = watch.stop().elapsed()
    watch.start()
    second = watch.stop().elapsed()
    assert second == first


def test_fresh_watch_reports_zero():
    assert StopWatch().elapsed() == 0.0


def test_context_manager_measures_block(monkeypatch):
    _fake_clock(monkeypatch, [10.0, 10.5])
    with StopWatch() as watch:
        pass
    assert watch.elapsed() == 500.0


def test_str_ends_with_unit(monkeypatch):
    _fake_clock(monkeypatch, [0.0, 0.25])
    watch = StopWatch()
    watch.start()
    watch.stop()
    assert str(watch) == f"{watch.elapsed()} ms"


def test_elapsed_while_running_warns(monkeypatch, caplog):
    _fake_clock(monkeypatch, itertools.count())
    watch = StopWatch()
    watch.start()
    with caplog.at_level(logging.WARNING, logger="meshkit.stop_watch"):
        watch.elapsed()
    assert "stop timer before calling elapsed()" in caplog.text


def test_real_clock_measures_nonnegative_time():
    watch = StopWatch()
    watch.start()
    sum(range(1000))
    assert watch.stop().elapsed() >= 0.0