import io

import pytest

from rowstore.cli import INSERTION_FAILED, main, prompt_row, run
from rowstore.row import NAME_MAX_LENGTH, InvalidInputError, Row

VALID_ROW_LINES = ["7\n", "Alice\n", "CSE\n", "Pune\n", "90\n", "80\n", "70\n", "60\n", "50\n"]


def _feeder(lines):
    it = iter(lines)
    return lambda: next(it, "")


def _collector():
    out = []
    return out, out.append


def _session(lines):
    stdin = io.StringIO("".join(lines))
    stdout = io.StringIO()
    code = run(stdin, stdout)
    return code, stdout.getvalue()


def test_prompt_row_builds_row():
    out, write = _collector()
    row = prompt_row(_feeder(VALID_ROW_LINES), write)
    assert row == Row(7, "Alice", "CSE", "Pune", 90, 80, 70, 60, 50)
    assert out[0] == "Enter Student ID (integer): "
    assert out[-1] == "Enter LIF marks: "


def test_prompt_row_truncates_long_name():
    lines = list(VALID_ROW_LINES)
    lines[1] = "A" * 30 + "\n"
    row = prompt_row(_feeder(lines), lambda s: None)
    assert row.name == "A" * NAME_MAX_LENGTH


def test_bad_id_still_prompts_every_field():
    lines = list(VALID_ROW_LINES)
    lines[0] = "abc\n"
    out, write = _collector()
    with pytest.raises(InvalidInputError) as info:
        prompt_row(_feeder(lines), write)
    assert str(info.value) == INSERTION_FAILED
    assert "Invalid input. Please enter an integer.\n" in out
    assert "Enter LIF marks: " in out


def test_bad_name_stops_prompting():
    lines = list(VALID_ROW_LINES)
    lines[1] = "Al1ce\n"
    out, write = _collector()
    with pytest.raises(InvalidInputError):
        prompt_row(_feeder(lines), write)
    assert "Invalid character in input. Use letters and spaces only.\n" in out
    assert "Enter Student branch (max 3 characters): " not in out


def test_empty_mark_is_rejected():
    lines = list(VALID_ROW_LINES)
    lines[4] = "\n"
    out, write = _collector()
    with pytest.raises(InvalidInputError):
        prompt_row(_feeder(lines), write)
    assert "Empty input is not allowed.\n" in out
    assert "Enter PHY marks: " not in out


def test_end_of_input_is_reported():
    out, write = _collector()
    with pytest.raises(InvalidInputError):
        prompt_row(_feeder(["7\n"]), write)
    assert "Error reading input.\n" in out


def test_full_session_insert_scan_print_delete():
    lines = ["1\n", *VALID_ROW_LINES, "3\n", "7\n", "4\n", "2\n", "7\n", "3\n", "7\n", "5\n"]
    code, output = _session(lines)
    assert code == 0
    described = Row(7, "Alice", "CSE", "Pune", 90, 80, 70, 60, 50).describe(1)
    assert "Row inserted successfully!\n" in output
    assert f"{described}\nEntry found with ID 7.\n" in output
    assert f"Page 1:\n  {described}\n" in output
    assert "Row with ID 7 deleted successfully.\n" in output
    assert "No entry found with ID 7.\n" in output
    assert output.endswith("Exiting\n")


def test_failed_insert_leaves_table_empty():
    lines = ["1\n", "x\n", *VALID_ROW_LINES[1:], "4\n", "5\n"]
    _, output = _session(lines)
    assert f"{INSERTION_FAILED}\n" in output
    assert "Row inserted successfully!" not in output
    assert "Table is empty.\n" in output


def test_invalid_choice_and_missing_delete():
    _, output = _session(["9\n", "2\n", "5\n", "5\n"])
    assert "Invalid choice. Please try again.\n" in output
    assert "Row with ID 5 not found.\n" in output


def test_run_stops_at_end_of_input():
    code, output = _session(["4\n"])
    assert code == 0
    assert "Table is empty.\n" in output
    assert "Exiting" not in output


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n5\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Printing the table...\nTable is empty.\n" in captured
    assert captured.endswith("Exiting\n")


def test_main_rejects_extra_arguments():
    with pytest.raises(SystemExit) as info:
        main(["unexpected"])
    assert info.value.code == 2