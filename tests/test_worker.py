import pytest

from multisort.worker import WorkerTask, read_integers


def test_read_integers_whitespace_separated(tmp_path):
    path = tmp_path / "a.dat"
    path.write_text("3 -1\n42\n\n  7\t0\n")
    assert read_integers(path) == [3, -1, 42, 7, 0]


def test_read_integers_stops_at_bad_token(tmp_path):
    path = tmp_path / "b.dat"
    path.write_text("12abc 5\n")
    assert read_integers(path) == [12]


def test_read_integers_empty_file(tmp_path):
    path = tmp_path / "empty.dat"
    path.write_text("")
    assert read_integers(path) == []


def test_read_integers_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_integers(tmp_path / "missing.dat")


def test_run_sorts_values_from_all_files(tmp_path):
    first = tmp_path / "1.dat"
    second = tmp_path / "2.dat"
    first.write_text("9 2 5\n")
    second.write_text("4 -3\n")
    task = WorkerTask(files=[str(first), str(second)])
    result = task.run()
    assert result == sorted([9, 2, 5, 4, -3])
    assert task.values == result
    assert task.total_values == 5
    assert task.elapsed >= 0.0
    assert task.failed == []


def test_run_skips_missing_files(tmp_path, capsys):
    present = tmp_path / "ok.dat"
    present.write_text("2 1\n")
    missing = str(tmp_path / "nope.dat")
    task = WorkerTask(files=[missing, str(present)])
    assert task.run() == [1, 2]
    assert task.failed == [missing]
    assert missing in capsys.readouterr().err


def test_run_with_no_files_yields_nothing():
    task = WorkerTask()
    assert task.run() == []
    assert task.total_values == 0