import logging

from csvwriter.backend.utils import delete_file_if_exists, ensure_parent_dir
from csvwriter.cli import main


def test_main_writes_demo_files(tmp_path, monkeypatch):
    monkeypatch.setenv("CSV_WRITER_LINE_TERMINATOR", "lf")
    monkeypatch.chdir(tmp_path)
    (tmp_path / "people.csv").write_text("old\n", encoding="utf-8")

    assert main(["--output-dir", str(tmp_path)]) == 0

    people = (tmp_path / "people.csv").read_text(encoding="utf-8").splitlines()
    assert people[0] == "First Name,Last Name,Day,Month,Year"
    assert people[1] == "Ivan,Ivanov,15,MARCH,1990"
    assert len(people) == 4

    students = (tmp_path / "students.csv").read_text(encoding="utf-8").splitlines()
    assert students[1] == "Alice Ivanova,95;88;92;90"

    special = (tmp_path / "special_cases.csv").read_text(encoding="utf-8").splitlines()
    assert "John,\"Smith, Jr.\",4,JULY,1970" in special
    assert '"John ""Johnny""",Doe,1,JANUARY,' in special


def test_main_reports_failure(tmp_path, monkeypatch, caplog):
    (tmp_path / "people.csv").mkdir()
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(tmp_path)]) == 1
    assert "Demo export failed" in caplog.text


def test_delete_file_if_exists(tmp_path):
    f = tmp_path / "a.csv"
    assert delete_file_if_exists(f) is False
    f.write_text("x", encoding="utf-8")
    assert delete_file_if_exists(f) is True
    assert not f.exists()


def test_ensure_parent_dir(tmp_path):
    target = tmp_path / "nested" / "deeper" / "out.csv"
    ensure_parent_dir(target)
    assert target.parent.is_dir()


def test_main_rejects_unknown_encoding(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("CSV_WRITER_ENCODING", "no-such-codec")
    monkeypatch.chdir(tmp_path)
    people = tmp_path / "people.csv"
    people.write_text("keep\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(tmp_path)]) == 1
    assert "CSV_WRITER_ENCODING" in caplog.text
    assert people.read_text(encoding="utf-8") == "keep\n"


def test_main_logs_write_failure_once(tmp_path, monkeypatch, caplog):
    (tmp_path / "people.csv").mkdir()
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert main(["-o", str(tmp_path)]) == 1
    assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1
