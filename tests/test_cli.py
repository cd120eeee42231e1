import pytest

from levaffinity.cli import SAMPLE_KEYS, main
from levaffinity.distance import affinity, distance


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_compare_worked_example(capsys):
    assert main(["compare", "identificar", "identify", "--case-sensitive"]) == 0
    assert _lines(capsys) == ["Distance: 4", "Affinity: 63.6364%"]


@pytest.mark.parametrize(
    "first, second",
    [
        ("こんにちは", "こんばんは"),
        ("notre", "nôtre"),
        ("سلام", "عليكم"),
        ("你好", "您好"),
    ],
)
def test_compare_unicode_agrees_with_library(capsys, first, second):
    assert main(["compare", first, second]) == 0
    expected = distance(first, second, False)
    score = affinity(len(first), len(second), expected)
    assert _lines(capsys) == [
        f"Distance: {expected}",
        f"Affinity: {score * 100:.4f}%",
    ]


def test_compare_case_insensitive_by_default(capsys):
    main(["compare", "HELLO", "hello"])
    assert _lines(capsys)[0] == "Distance: 0"
    main(["compare", "HELLO", "hello", "-c"])
    assert _lines(capsys)[0] == "Distance: 5"


def test_compare_identical_is_full_affinity(capsys):
    main(["compare", "notre", "notre"])
    assert _lines(capsys) == ["Distance: 0", "Affinity: 100.0000%"]


def test_search_explicit_candidates_in_order(capsys):
    assert main(["search", "password_alt", "password_salt", "smtp_password"]) == 0
    lines = _lines(capsys)
    assert len(lines) == 2
    assert lines[0].endswith(". password_salt")
    assert lines[1].endswith(". smtp_password")
    expected = distance("password_alt", "password_salt", False)
    assert lines[0].startswith(f"Distance: {expected}, ")


def test_search_defaults_to_sample_keys(capsys):
    main(["search", "projet_name"])
    lines = _lines(capsys)
    assert len(lines) == len(SAMPLE_KEYS)
    assert [line.rsplit(". ", 1)[1] for line in lines] == list(SAMPLE_KEYS)


def test_search_workers_do_not_change_output(capsys):
    main(["search", "password_alt", "--workers", "1"])
    serial = _lines(capsys)
    main(["search", "password_alt", "--workers", "3"])
    threaded = _lines(capsys)
    assert serial == threaded


def test_search_reads_file(tmp_path, capsys):
    source = tmp_path / "keys.txt"
    source.write_text("db_host\n\ndb_port\n", encoding="utf-8")
    assert main(["search", "db_hast", "--file", str(source)]) == 0
    lines = _lines(capsys)
    assert [line.rsplit(". ", 1)[1] for line in lines] == ["db_host", "db_port"]
    assert lines[0].startswith("Distance: 1, ")


def test_search_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["search", "word", "--file", str(missing)]) == 1
    assert "levaffinity:" in capsys.readouterr().err


def test_search_time_adds_a_line(capsys):
    main(["search", "word", "ward", "--time"])
    lines = _lines(capsys)
    assert len(lines) == 2
    assert lines[1].startswith("Elapsed: ")
    assert lines[1].endswith(" ns)")


@pytest.mark.parametrize("workers", ["0", "-2", "many"])
def test_search_rejects_bad_workers(workers):
    with pytest.raises(SystemExit) as excinfo:
        main(["search", "word", "--workers", workers])
    assert excinfo.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2