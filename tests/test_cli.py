import io

import pytest

from ibcfrec.cli import main, read_queries, read_training, run_files, run_stream

TRAINING = ["1 7 2", "2 7 3", "1 8 4"]


def test_read_training_groups_by_film():
    data = read_training(TRAINING)
    assert data == {7: {1: 2.0, 2: 3.0}, 8: {1: 4.0}}


def test_read_training_stops_at_test_header():
    it = iter(TRAINING + ["test dataset", "5 7"])
    data = read_training(it)
    assert set(data) == {7, 8}
    assert list(it) == ["5 7"]


def test_read_training_rejects_malformed_line():
    with pytest.raises(ValueError):
        read_training(["1 two 3"])


def test_read_queries_takes_first_two_fields():
    assert list(read_queries(["3 7", "", "4 8 5"])) == [(3, 7), (4, 8)]


def test_read_queries_rejects_short_line():
    with pytest.raises(ValueError):
        list(read_queries(["3"]))


def test_run_stream_predicts_film_mean_for_new_user():
    lines = ["train dataset", *TRAINING, "test dataset", "3 7", "3 99"]
    assert run_stream(lines, 40) == pytest.approx([2.5, 0.0])


def test_run_stream_without_header_has_no_training():
    assert run_stream(["something else", "1 7"], 40) == [0.0]


def test_run_stream_empty_input():
    assert run_stream([], 40) == []


def test_run_files(tmp_path):
    train = tmp_path / "train.txt"
    test = tmp_path / "test.txt"
    train.write_text("\n".join(TRAINING) + "\n")
    test.write_text("3 7\n3 8\n")
    assert run_files(str(train), str(test), 40) == pytest.approx([2.5, 4.0])


def test_run_files_missing_file(tmp_path):
    with pytest.raises(OSError):
        run_files(str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt"), 40)


def test_main_prints_predictions(tmp_path, capsys):
    train = tmp_path / "train.txt"
    test = tmp_path / "test.txt"
    train.write_text("\n".join(TRAINING) + "\n")
    test.write_text("3 7\n3 99\n")
    assert main(["--train", str(train), "--test", str(test)]) == 0
    assert capsys.readouterr().out == "2.5\n0\n"


def test_main_reports_missing_files(tmp_path, capsys):
    code = main(["--train", str(tmp_path / "a"), "--test", str(tmp_path / "b")])
    assert code == 1
    assert "Error opening input files." in capsys.readouterr().err


def test_main_reads_stdin(monkeypatch, capsys):
    text = "train dataset\n" + "\n".join(TRAINING) + "\ntest dataset\n3 8\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["--stdin"]) == 0
    assert capsys.readouterr().out == "4\n"