import copy

import pytest

from benchtrack.models.benchmark_data import BenchmarkData

REPO_URL = "https://github.com/paritytech/jsonrpsee"


def make_commit(commit_id, timestamp="2021-10-15T13:13:38Z", message="benches: update"):
    return {
        "author": {"name": "paritytech", "username": "paritytech"},
        "committer": {"name": "paritytech", "username": "paritytech"},
        "id": commit_id,
        "message": message,
        "timestamp": timestamp,
        "url": f"{REPO_URL}/pull/527/commits/{commit_id}",
    }


def make_entry(commit_id, date, benches, tool="cargo"):
    return {
        "commit": make_commit(commit_id),
        "date": date,
        "tool": tool,
        "benches": [
            {"name": name, "value": value, "range": f"± {variance}", "unit": "ns/iter"}
            for name, value, variance in benches
        ],
    }


SAMPLE_RAW = {
    "lastUpdate": 1634309082858,
    "repoUrl": REPO_URL,
    "entries": {
        "Benchmark": [
            make_entry("1f2e3d4c5b6a79881f2e3d4c5b6a79881f2e3d4c", 1634222681203, [
                ("jsonrpsee_types_v2_array_ref", 180, 1),
                ("sync/http_round_trip", 150000, 12000),
                ("sync/http_concurrent_round_trip/1", 131000, 9500),
                ("subscriptions/unsub", 1000, 300),
            ]),
            make_entry("9da032cc5a48e3c2fa0432062ad7c75caa44ad5d", 1634309082858, [
                ("jsonrpsee_types_v2_array_ref", 176, 0),
                ("sync/http_round_trip", 149599, 12891),
                ("sync/http_concurrent_round_trip/1", 130997, 9516),
                ("subscriptions/unsub", 1065, 307),
            ]),
        ]
    },
}


@pytest.fixture
def sample_raw():
    return copy.deepcopy(SAMPLE_RAW)


@pytest.fixture
def sample_data(sample_raw):
    return BenchmarkData.from_dict(sample_raw)


@pytest.fixture
def data_js(tmp_path, sample_raw):
    import json

    path = tmp_path / "dev" / "bench" / "data.js"
    path.parent.mkdir(parents=True)
    path.write_text("window.BENCHMARK_DATA = " + json.dumps(sample_raw, indent=2), encoding="utf-8")
    return path


CARGO_OUTPUT = """\
running 4 tests
test jsonrpsee_types_v2_array_ref ... bench:         176 ns/iter (+/- 0)
test jsonrpsee_types_v2_vec ... bench:         212 ns/iter (+/- 2)
test sync/http_round_trip ... bench:     149,599 ns/iter (+/- 12,891)
test subscriptions/unsub ... bench:       1,065 ns/iter (+/- 307)

test result: ok. 0 passed; 0 failed; 0 ignored; 4 measured; 0 filtered out
"""
