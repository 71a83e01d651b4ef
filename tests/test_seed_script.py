from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_library.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_library", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_seed_adds_author_and_books(data_file, capsys):
    seed = _load_script()
    seed.main(["--author", "Tolkien", "--book", "The Hobbit", "--book", "The Silmarillion", "--data-file", str(data_file)])

    on_disk = json.loads(data_file.read_text(encoding="utf-8"))
    assert on_disk["authors"] == [{"id": 1, "name": "Tolkien"}]
    assert [b["authorID"] for b in on_disk["books"]] == [1, 1]
    assert "2 book(s)" in capsys.readouterr().out


def test_seed_rejects_blank_author(data_file):
    seed = _load_script()
    with pytest.raises(SystemExit):
        seed.main(["--author", "  ", "--data-file", str(data_file)])
    assert not data_file.exists()


def test_seed_reports_malformed_data_file(data_file):
    data_file.write_text('{"authors": null, "books": []}', encoding="utf-8")
    seed = _load_script()
    with pytest.raises(SystemExit) as excinfo:
        seed.main(["--author", "Tolkien", "--data-file", str(data_file)])
    assert "Failed to update" in str(excinfo.value)
