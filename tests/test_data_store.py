import json

import pytest

from benchtrack.models.benchmark_data import Author, Commit, Entry, Measurement
from benchtrack.service.store import data_store


def new_entry(date, commit_id="abc123"):
    author = Author(name="dev", username="dev")
    commit = Commit(author=author, committer=author, id=commit_id, message="msg",
                    timestamp="2021-10-16T00:00:00Z", url=f"https://example.com/commit/{commit_id}")
    return Entry(commit=commit, date=date, tool="cargo",
                 benches=[Measurement(name="sync/http_round_trip", value=150000, range="± 100", unit="ns/iter")])


def test_load_script_file(data_js):
    data = data_store.load(data_js)
    assert data.last_update == 1634309082858
    assert len(data.entries["Benchmark"]) == 2


def test_load_plain_json(tmp_path, sample_raw):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_raw), encoding="utf-8")
    assert data_store.load(path).repo_url == sample_raw["repoUrl"]


def test_parse_content_accepts_trailing_semicolon(sample_raw):
    content = "window.BENCHMARK_DATA=" + json.dumps(sample_raw) + ";\n"
    assert data_store.parse_content(content).last_update == sample_raw["lastUpdate"]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        data_store.load(tmp_path / "nope.js")


def test_load_missing_file_creates_empty_history(tmp_path):
    data = data_store.load(tmp_path / "nope.js", create_if_missing=True, repo_url="https://example.com")
    assert data.entries == {}
    assert data.repo_url == "https://example.com"


def test_load_invalid_json(tmp_path):
    path = tmp_path / "data.js"
    path.write_text("window.BENCHMARK_DATA = {not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        data_store.load(path)


def test_load_missing_key(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"lastUpdate": 1, "entries": {}}), encoding="utf-8")
    with pytest.raises(ValueError, match="repoUrl"):
        data_store.load(path)


def test_save_writes_prefix_for_script_files(tmp_path, sample_data, sample_raw):
    path = tmp_path / "out" / "data.js"
    data_store.save(sample_data, path)

    content = path.read_text(encoding="utf-8")
    assert content.startswith("window.BENCHMARK_DATA = {")
    assert "± 12891" in content
    assert data_store.load(path).to_dict() == sample_raw
    assert list(path.parent.iterdir()) == [path]


def test_save_plain_json(tmp_path, sample_data):
    path = tmp_path / "data.json"
    data_store.save(sample_data, path)
    assert json.loads(path.read_text(encoding="utf-8"))["lastUpdate"] == sample_data.last_update


def test_append_entry_updates_last_update(sample_data):
    data_store.append_entry(sample_data, "Benchmark", new_entry(1634400000000))
    assert len(sample_data.entries["Benchmark"]) == 3
    assert sample_data.last_update == 1634400000000


def test_append_entry_creates_suite(sample_data):
    data_store.append_entry(sample_data, "Nightly", new_entry(1634400000000))
    assert sample_data.suites() == ["Benchmark", "Nightly"]


def test_append_entry_rejects_older_date(sample_data):
    with pytest.raises(ValueError, match="append-only"):
        data_store.append_entry(sample_data, "Benchmark", new_entry(1634000000000))
    assert len(sample_data.entries["Benchmark"]) == 2


def test_append_entry_accepts_equal_date(sample_data):
    data_store.append_entry(sample_data, "Benchmark", new_entry(1634309082858))
    assert len(sample_data.entries["Benchmark"]) == 3


def test_append_entry_trims_to_max_items(sample_data):
    data_store.append_entry(sample_data, "Benchmark", new_entry(1634400000000, "new"), max_items=2)
    runs = sample_data.entries["Benchmark"]
    assert [run.commit.id for run in runs] == ["9da032cc5a48e3c2fa0432062ad7c75caa44ad5d", "new"]


def test_last_update_never_moves_back(sample_data):
    data_store.append_entry(sample_data, "Nightly", new_entry(1600000000000))
    assert sample_data.last_update == 1634309082858
