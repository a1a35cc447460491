from time import sleep

from lambdas.utils.profiler import TimingStats, timed_block


def test_timed_block_measures_time() -> None:
    with timed_block("sleep") as stats:
        sleep(0.05)
    assert stats.label == "sleep"
    assert stats.duration_seconds >= 0.05
    assert stats.end_ts > stats.start_ts
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)


def test_timed_block_records_on_error() -> None:
    captured: list[TimingStats] = []
    try:
        with timed_block("boom") as stats:
            captured.append(stats)
            raise ValueError("boom")
    except ValueError:
        pass
    assert captured[0].duration_seconds > 0


def test_timed_block_records_resident_memory() -> None:
    with timed_block("alloc") as stats:
        _ = [0] * 1000
    assert stats.rss_bytes is None or stats.rss_bytes > 0
