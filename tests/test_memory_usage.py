import logging
import mmap

from meshkit import memory_usage
from meshkit.memory_usage import current_size, max_size


def test_max_size_is_nonnegative_int():
    size = max_size()
    assert isinstance(size, int) and size >= 0


def test_max_size_never_decreases():
    before = max_size()
    block = bytearray(4 * 1024 * 1024)
    block[::4096] = b"\x01" * len(block[::4096])
    after = max_size()
    assert after >= before


def test_current_size_is_nonnegative_int():
    size = current_size()
    assert isinstance(size, int) and size >= 0


def test_unknown_platform_reports_zero(monkeypatch):
    monkeypatch.setattr(memory_usage, "_PLATFORM", "plan9")
    assert max_size() == 0
    assert current_size() == 0


def test_current_size_reads_statm(monkeypatch, tmp_path):
    statm = tmp_path / "statm"
    statm.write_text("100 25 3 1 0 20 0\n", encoding="ascii")
    monkeypatch.setattr(memory_usage, "_PLATFORM", "linux")
    monkeypatch.setattr(memory_usage, "_STATM_PATH", str(statm))
    assert current_size() == 25 * mmap.PAGESIZE


def test_current_size_missing_file(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(memory_usage, "_PLATFORM", "linux")
    monkeypatch.setattr(memory_usage, "_STATM_PATH", str(tmp_path / "missing"))
    with caplog.at_level(logging.ERROR, logger="meshkit.memory_usage"):
        assert current_size() == 0
    assert "Failed to read process information file" in caplog.text


def test_current_size_malformed_file(monkeypatch, tmp_path, caplog):
    statm = tmp_path / "statm"
    statm.write_text("100\n", encoding="ascii")
    monkeypatch.setattr(memory_usage, "_PLATFORM", "linux")
    monkeypatch.setattr(memory_usage, "_STATM_PATH", str(statm))
    with caplog.at_level(logging.ERROR, logger="meshkit.memory_usage"):
        assert current_size() == 0
    assert "Failed to retrieve RSS information" in caplog.text