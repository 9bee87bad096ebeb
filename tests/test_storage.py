from dataclasses import dataclass

import pytest

from gosu.db.storage import MarshalType, load_data, marshal, save_data, unmarshal

SAMPLE = [[{"path": "music/a.osu", "level": 3.5, "note_counts": [10, 2]}], []]


@dataclass
class _Entry:
    path: str
    level: float


def test_json_is_compact():
    assert marshal({"a": 1}, MarshalType.JSON) == b'{"a":1}'


def test_msgpack_wire_bytes():
    assert marshal([1], MarshalType.MSGPACK) == b"\x91\x01"


@pytest.mark.parametrize("kind", list(MarshalType))
def test_marshal_round_trip(kind):
    assert unmarshal(marshal(SAMPLE, kind), kind) == SAMPLE


def test_kind_given_as_string():
    assert unmarshal(marshal(SAMPLE, "msgpack"), "msgpack") == SAMPLE


@pytest.mark.parametrize("kind", list(MarshalType))
def test_dataclasses_become_mappings(kind):
    decoded = unmarshal(marshal([_Entry("x.osu", 2.0)], kind), kind)
    assert decoded == [{"path": "x.osu", "level": 2.0}]


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        marshal(SAMPLE, "yaml")


@pytest.mark.parametrize("kind", list(MarshalType))
def test_save_then_load(tmp_path, kind):
    path = tmp_path / "chart.db"
    assert save_data(path, SAMPLE, kind) is True
    assert load_data(path, kind) == SAMPLE


def test_load_missing_file_raises(tmp_path):
    path = tmp_path / "missing.db"
    with pytest.raises(FileNotFoundError):
        load_data(path)
    assert not (tmp_path / "missing.db.crashed").exists()


@pytest.mark.parametrize("kind", list(MarshalType))
def test_load_corrupt_file_renames_it(tmp_path, kind):
    path = tmp_path / "chart.db"
    path.write_bytes(b"\xc1{not valid")
    with pytest.raises(ValueError):
        load_data(path, kind)
    assert not path.exists()
    assert (tmp_path / "chart.db.crashed").read_bytes() == b"\xc1{not valid"


def test_save_unserialisable_returns_false(tmp_path):
    path = tmp_path / "chart.json"
    assert save_data(path, object()) is False
    assert not path.exists()


def test_save_into_missing_directory_returns_false(tmp_path):
    assert save_data(tmp_path / "no" / "such" / "chart.json", SAMPLE) is False