import json

import pytest

from evlab.domain.errors import Unavailable
from evlab.services.dataset_service import EMPTY_DATASET, Dataset, load_dataset


def test_load_keeps_exact_bytes(tmp_path):
    raw = b'[\n  {"make": "Kia",   "model": "EV6", "range_km": 528},\n  {"make": "BYD", "model": "Seal"}\n]\n'
    path = tmp_path / "evs.json"
    path.write_bytes(raw)

    ds = load_dataset(path)

    assert len(ds) == 2
    assert ds.records[0]["make"] == "Kia"
    assert ds.get() == raw


def test_missing_file_degrades_to_empty(tmp_path, caplog):
    ds = load_dataset(tmp_path / "nope.json")

    assert ds is EMPTY_DATASET
    assert "no encontrado" in caplog.text


@pytest.mark.parametrize("content", [b"{not json", b'{"make": "Kia"}', b"\xff\xfe", b"[]"])
def test_bad_or_empty_content_is_unavailable(tmp_path, content):
    path = tmp_path / "evs.json"
    path.write_bytes(content)

    with pytest.raises(Unavailable):
        load_dataset(path).get()


def test_empty_dataset_raises_unavailable():
    with pytest.raises(Unavailable) as exc:
        Dataset().get()

    assert exc.value.status_code == 503


def test_bundled_dataset_loads():
    ds = load_dataset("data/evs.json")

    assert len(ds) > 0
    assert json.loads(ds.get()) == list(ds.records)
