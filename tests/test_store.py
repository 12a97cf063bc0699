"""Tests for zz/store.py registry operations"""

import json
import pytest
from pathlib import Path

from zz.errors import BucketNotFound, DuplicateBucket, PathNotFound, PersistenceError
from zz.store import Bucket, BucketStore, Registry, dumps_registry, loads_registry


@pytest.fixture
def store_file(tmp_path):
    return tmp_path / ".zz.json"


@pytest.fixture
def store(store_file):
    return BucketStore.open(store_file)


@pytest.fixture
def dirs(tmp_path):
    created = {}
    for name in ("a", "b", "work"):
        d = tmp_path / "buckets" / name
        d.mkdir(parents=True)
        created[name] = str(d)
    return created


def read_store(store_file):
    return json.loads(store_file.read_text(encoding="utf-8"))


class TestLoad:
    def test_initializes_missing_file(self, store_file):
        store = BucketStore.open(store_file)
        assert store_file.exists()
        assert read_store(store_file) == {"default_bucket": None, "buckets": []}
        assert store.buckets() == []
        assert store.default_bucket() is None

    def test_reads_existing_file(self, store_file):
        store_file.write_text(json.dumps({
            "default_bucket": "x",
            "buckets": [{"name": "x", "path": "/tmp/x"}],
        }), encoding="utf-8")
        store = BucketStore.open(store_file)
        assert store.buckets() == [Bucket(name="x", path="/tmp/x")]
        assert store.default_bucket() == Bucket(name="x", path="/tmp/x")

    def test_missing_default_key_reads_as_unset(self, store_file):
        store_file.write_text('{"buckets": []}', encoding="utf-8")
        assert BucketStore.open(store_file).data.default_bucket is None

    def test_invalid_json(self, store_file):
        store_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError):
            BucketStore.open(store_file)

    def test_wrong_shape(self, store_file):
        store_file.write_text('{"default_bucket": null, "buckets": [{"name": 1}]}', encoding="utf-8")
        with pytest.raises(PersistenceError):
            BucketStore.open(store_file)

    def test_unwritable_location(self, tmp_path):
        with pytest.raises(PersistenceError):
            BucketStore.open(tmp_path / "missing" / ".zz.json")


class TestRoundTrip:
    @pytest.mark.parametrize("registry", [
        Registry(),
        Registry(default_bucket="a", buckets=[Bucket("a", "/x/a")]),
        Registry(default_bucket=None, buckets=[Bucket("a", "rel/a"), Bucket("b", "/b")]),
    ])
    def test_serialize_then_parse(self, registry):
        assert loads_registry(dumps_registry(registry)) == registry

    def test_persist_then_load(self, store, store_file, dirs):
        store.add_bucket("a", dirs["a"])
        store.add_bucket("b", dirs["b"])
        reloaded = BucketStore.open(store_file)
        assert reloaded.data == store.data

    def test_persist_leaves_no_temp_file(self, store, store_file, dirs):
        store.add_bucket("a", dirs["a"])
        assert not (store_file.parent / ".zz.json.tmp").exists()


class TestAddBucket:
    def test_first_bucket_becomes_default(self, store, dirs):
        store.add_bucket("work", dirs["work"])
        assert store.default_bucket().name == "work"

    def test_later_bucket_keeps_default(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        store.add_bucket("b", dirs["b"])
        assert store.default_bucket().name == "a"
        assert [b.name for b in store.buckets()] == ["a", "b"]

    def test_missing_path_is_not_registered(self, store, store_file):
        with pytest.raises(PathNotFound):
            store.add_bucket("x", "/path/does/not/exist")
        assert store.buckets() == []
        assert read_store(store_file)["buckets"] == []

    def test_duplicate_name_rejected(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        with pytest.raises(DuplicateBucket):
            store.add_bucket("a", dirs["b"])
        assert store.buckets() == [Bucket("a", dirs["a"])]

    def test_add_persists(self, store, store_file, dirs):
        store.add_bucket("a", dirs["a"])
        assert read_store(store_file) == {
            "default_bucket": "a",
            "buckets": [{"name": "a", "path": dirs["a"]}],
        }


class TestDefaultBucket:
    def test_set_unknown_leaves_default(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        with pytest.raises(BucketNotFound):
            store.set_default_bucket("nope")
        assert store.data.default_bucket == "a"

    def test_set_known(self, store, store_file, dirs):
        store.add_bucket("a", dirs["a"])
        store.add_bucket("b", dirs["b"])
        store.set_default_bucket("b")
        assert store.default_bucket().name == "b"
        assert read_store(store_file)["default_bucket"] == "b"

    def test_unset_twice(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        store.unset_default_bucket()
        store.unset_default_bucket()
        assert store.default_bucket() is None

    def test_dangling_default_resolves_to_nothing(self, store_file):
        store_file.write_text('{"default_bucket": "gone", "buckets": []}', encoding="utf-8")
        store = BucketStore.open(store_file)
        assert store.default_bucket() is None
        assert store.data.default_bucket == "gone"


class TestForgetBucket:
    def test_forget_default_clears_it(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        store.add_bucket("b", dirs["b"])
        removed = store.forget_bucket("a")
        assert removed == 1
        assert len(store.buckets()) == 1
        assert store.default_bucket() is None

    def test_forget_other_keeps_default(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        store.add_bucket("b", dirs["b"])
        store.forget_bucket("b")
        assert store.default_bucket().name == "a"

    def test_forget_unknown_removes_nothing(self, store, store_file, dirs):
        store.add_bucket("a", dirs["a"])
        assert store.forget_bucket("zzz") == 0
        assert [b.name for b in store.buckets()] == ["a"]

    def test_forget_removes_all_duplicates(self, store_file):
        store_file.write_text(json.dumps({
            "default_bucket": None,
            "buckets": [
                {"name": "d", "path": "/one"},
                {"name": "e", "path": "/two"},
                {"name": "d", "path": "/three"},
            ],
        }), encoding="utf-8")
        store = BucketStore.open(store_file)
        assert store.find_bucket("d").path == "/one"
        assert store.forget_bucket("d") == 2
        assert read_store(store_file)["buckets"] == [{"name": "e", "path": "/two"}]

    def test_forget_does_not_touch_directory(self, store, dirs):
        store.add_bucket("a", dirs["a"])
        store.forget_bucket("a")
        assert Path(dirs["a"]).is_dir()
