"""Tests for the CLI entry point."""

import json
import os
import time

import pytest
from click.testing import CliRunner
from loguru import logger

from jotbook.core.cli import main


@pytest.fixture(autouse=True)
def _drop_log_sinks(tmp_dir):
    """The CLI binds loguru to the runner's stderr and a log file; detach both first."""
    yield
    logger.remove()


@pytest.fixture
def invoke(tmp_dir, monkeypatch):
    for key in list(os.environ):
        if key.startswith("JOTBOOK_"):
            monkeypatch.delenv(key)
    runner = CliRunner()
    base = ["--config", os.path.join(tmp_dir, "config.yaml"), "--data-dir", os.path.join(tmp_dir, "data")]

    def _invoke(*args, input=None):
        return runner.invoke(main, [*base, *args], input=input)

    return _invoke


def _saved_id(result):
    assert result.exit_code == 0, result.output
    return result.output.strip().split()[-1]


class TestCliGroup:
    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Jotbook" in result.output
        for command in ("write", "edit", "show", "list", "delete", "clear", "export", "import"):
            assert command in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestWrite:
    def test_write_argument(self, invoke):
        entry_id = _saved_id(invoke("write", "Hello journal"))
        assert entry_id.startswith("entry_")
        result = invoke("show", entry_id)
        assert result.exit_code == 0
        assert "Hello journal" in result.output
        assert "Created:" in result.output

    def test_write_from_stdin(self, invoke):
        entry_id = _saved_id(invoke("write", input="Piped\nsecond line\n"))
        result = invoke("show", entry_id)
        assert "second line" in result.output

    def test_write_blank_fails(self, invoke):
        result = invoke("write", "   ")
        assert result.exit_code == 1
        assert "Entry is empty" in result.output
        assert "No entries yet" in invoke("list").output


class TestEdit:
    def test_edit_replaces_content(self, invoke):
        entry_id = _saved_id(invoke("write", "before"))
        result = invoke("edit", entry_id, "after")
        assert result.exit_code == 0
        assert f"Updated {entry_id}" in result.output
        assert "after" in invoke("show", entry_id).output

    def test_edit_unknown(self, invoke):
        result = invoke("edit", "entry_missing", "text")
        assert result.exit_code == 1
        assert "Entry not found" in result.output

    def test_show_unknown(self, invoke):
        assert invoke("show", "entry_missing").exit_code == 1


class TestList:
    def test_plain_listing_sorted(self, invoke):
        first = _saved_id(invoke("write", "Alpha day"))
        second = _saved_id(invoke("write", "Beta day"))

        newest = invoke("list", "--plain").output.strip().splitlines()
        oldest = invoke("list", "--plain", "--sort", "asc").output.strip().splitlines()
        ids_desc = [line.split("\t")[0] for line in newest]
        ids_asc = [line.split("\t")[0] for line in oldest]
        assert sorted(ids_desc) == sorted([first, second])
        assert ids_asc == list(reversed(ids_desc)) or ids_asc == ids_desc

    def test_search(self, invoke):
        invoke("write", "Alpha day")
        invoke("write", "Beta day")
        result = invoke("list", "--plain", "--search", "ALPHA")
        assert "Alpha day" in result.output
        assert "Beta day" not in result.output

    def test_search_no_matches(self, invoke):
        invoke("write", "Alpha day")
        result = invoke("list", "--search", "zebra")
        assert result.exit_code == 0
        assert "No entries match your search." in result.output

    def test_table(self, invoke):
        invoke("write", "Gamma")
        result = invoke("list")
        assert result.exit_code == 0
        assert "Gamma" in result.output
        assert "Newest first" in result.output

    def test_invalid_sort(self, invoke):
        assert invoke("list", "--sort", "sideways").exit_code == 2


class TestDestructive:
    def test_delete_confirmed(self, invoke):
        entry_id = _saved_id(invoke("write", "doomed"))
        result = invoke("delete", entry_id, input="y\n")
        assert result.exit_code == 0
        assert "cannot be undone" in result.output
        assert f"Deleted {entry_id}" in result.output
        assert invoke("show", entry_id).exit_code == 1

    def test_delete_declined(self, invoke):
        entry_id = _saved_id(invoke("write", "safe"))
        result = invoke("delete", entry_id, input="n\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert invoke("show", entry_id).exit_code == 0

    def test_delete_yes_flag(self, invoke):
        entry_id = _saved_id(invoke("write", "doomed"))
        result = invoke("delete", entry_id, "--yes")
        assert result.exit_code == 0
        assert "cannot be undone" not in result.output

    def test_delete_unknown(self, invoke):
        result = invoke("delete", "entry_missing", "--yes")
        assert result.exit_code == 1

    def test_clear(self, invoke):
        invoke("write", "a")
        invoke("write", "b")
        result = invoke("clear", input="y\n")
        assert result.exit_code == 0
        assert "Cleared 2 entries." in result.output
        assert "No entries yet" in invoke("list").output

    def test_clear_declined(self, invoke):
        invoke("write", "a")
        result = invoke("clear", input="n\n")
        assert "Cancelled." in result.output
        assert len(invoke("list", "--plain").output.strip().splitlines()) == 1


class TestExchange:
    def test_export_and_import_roundtrip(self, invoke, tmp_dir):
        entry_id = _saved_id(invoke("write", "portable"))
        out = os.path.join(tmp_dir, "backups")
        result = invoke("export", "--out", out)
        assert result.exit_code == 0
        [filename] = os.listdir(out)
        assert filename.startswith("journal-export-")

        result = invoke("import", os.path.join(out, filename))
        assert result.exit_code == 0
        assert "Imported 1 entry." in result.output
        listed = invoke("list", "--plain").output.strip().splitlines()
        assert [line.split("\t")[0] for line in listed] == [entry_id]

    def test_export_single_entry(self, invoke, tmp_dir):
        entry_id = _saved_id(invoke("write", "just me"))
        out = os.path.join(tmp_dir, "one")
        assert invoke("export", "--entry", entry_id, "--out", out).exit_code == 0
        [filename] = os.listdir(out)
        assert filename.startswith("journal-entry-")
        with open(os.path.join(out, filename)) as f:
            assert json.load(f)["entry"]["content"] == "just me"

    def test_export_defaults_to_data_dir(self, invoke, tmp_dir):
        invoke("write", "x")
        assert invoke("export").exit_code == 0
        assert os.listdir(os.path.join(tmp_dir, "data", "exports"))

    def test_import_new_entries(self, invoke, tmp_dir):
        path = os.path.join(tmp_dir, "incoming.json")
        with open(path, "w") as f:
            json.dump({"version": 2, "entries": [{"id": "a", "content": "one"}, {"id": "b", "content": "two"}]}, f)
        result = invoke("import", path)
        assert "Imported 2 entries." in result.output
        assert "two" in invoke("show", "b").output

    def test_import_invalid(self, invoke, tmp_dir):
        invoke("write", "keep")
        path = os.path.join(tmp_dir, "broken.json")
        with open(path, "w") as f:
            f.write('{"entries": [')
        result = invoke("import", path)
        assert result.exit_code == 1
        assert "Failed to import file" in result.output
        assert len(invoke("list", "--plain").output.strip().splitlines()) == 1

    def test_import_wrong_shape(self, invoke, tmp_dir):
        path = os.path.join(tmp_dir, "other.json")
        with open(path, "w") as f:
            json.dump({"notes": []}, f)
        result = invoke("import", path)
        assert result.exit_code == 1
        assert "Invalid journal export file." in result.output


class TestRobustness:
    @pytest.fixture
    def utc_minus_five(self, monkeypatch):
        monkeypatch.setenv("TZ", "EST+05")
        time.tzset()
        yield
        monkeypatch.undo()
        time.tzset()

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_year_one_entry_lists_and_shows(self, invoke, tmp_dir, utc_minus_five):
        path = os.path.join(tmp_dir, "ancient.json")
        with open(path, "w") as f:
            json.dump({"entry": {"id": "old", "createdAt": "0001-01-01T00:00:00Z", "content": "very old"}}, f)
        assert invoke("import", path).exit_code == 0

        listed = invoke("list")
        assert listed.exit_code == 0, listed.output
        assert "very old" in listed.output
        shown = invoke("show", "old")
        assert shown.exit_code == 0, shown.output
        assert "0001" in shown.output

    def test_same_day_exports_keep_both_files(self, invoke, tmp_dir):
        first = _saved_id(invoke("write", "one"))
        second = _saved_id(invoke("write", "two"))
        out = os.path.join(tmp_dir, "exports")
        invoke("export", "--entry", first, "--out", out)
        invoke("export", "--entry", second, "--out", out)
        assert len(os.listdir(out)) == 2

    def test_writes_log_file_under_data_dir(self, invoke, tmp_dir):
        invoke("write", "logged")
        log_file = os.path.join(tmp_dir, "data", "logs", "jotbook.log")
        logger.remove()
        with open(log_file, encoding="utf-8") as f:
            assert "Created entry" in f.read()

    def test_log_file_can_be_disabled(self, invoke, tmp_dir, monkeypatch):
        monkeypatch.setenv("JOTBOOK_LOGGING__TO_FILE", "false")
        invoke("write", "quiet")
        assert not os.path.exists(os.path.join(tmp_dir, "data", "logs"))
