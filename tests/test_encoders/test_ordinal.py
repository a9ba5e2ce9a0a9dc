"""Tests for the ordinal encoder."""

import numpy as np
import pytest

from labello.core.errors import StrategyMismatchError
from labello.core.schema import Config, EncoderType, Transform
from labello.encoders.base import first_seen_indices
from labello.encoders.ordinal import OrdinalEncoder

DATA = ["hello", "world", "world", "world", "world", "again", "hello", "again", "goodbye"]


class TestFirstSeenIndices:
    def test_first_seen_order(self):
        assert first_seen_indices(["b", "a", "b", "c"]) == {"b": 0, "a": 1, "c": 2}

    def test_ceiling(self):
        m = first_seen_indices(["a", "b", "c", "d"], max_classes=2)
        assert m == {"a": 0, "b": 1, "c": 1, "d": 1}

    def test_ceiling_of_one(self):
        m = first_seen_indices(["a", "b", "c"], max_classes=1)
        assert set(m.values()) == {0}

    def test_empty(self):
        assert first_seen_indices([]) == {}


class TestOrdinalFit:
    def test_mapping(self):
        enc = OrdinalEncoder().fit(DATA)
        assert dict(enc.mapping) == {"hello": 0, "world": 1, "again": 2, "goodbye": 3}
        assert enc.nclasses() == 4

    def test_transform(self):
        enc = OrdinalEncoder().fit(DATA, Config())
        t = enc.transform(DATA)
        assert t.kind is EncoderType.ORDINAL
        assert t == [0, 1, 1, 1, 1, 2, 0, 2, 3]

    def test_max_classes_collision(self):
        enc = OrdinalEncoder().fit(DATA, Config(max_classes=3))
        assert enc.mapping["again"] == 2
        assert enc.mapping["goodbye"] == 2
        assert enc.nclasses() == 3
        # raw category count is still 4
        assert len(enc.uniques()) == 4

    def test_max_classes_above_cardinality(self):
        enc = OrdinalEncoder().fit(DATA, Config(max_classes=10))
        assert enc.nclasses() == 4

    def test_indices_within_ceiling(self):
        data = [f"c{i}" for i in range(50)]
        for k in (1, 2, 7, 49, 50):
            enc = OrdinalEncoder().fit(data, Config(max_classes=k))
            assert all(0 <= v <= k - 1 for v in enc.mapping.values())
            assert enc.nclasses() == k

    def test_nclasses_equals_distinct_count(self):
        rng = np.random.default_rng(0)
        data = rng.integers(0, 30, size=200).tolist()
        enc = OrdinalEncoder().fit(data)
        assert enc.nclasses() == len(set(data))

    def test_refit_replaces_mapping(self):
        enc = OrdinalEncoder().fit(DATA)
        enc.fit(["x", "y"])
        assert enc.uniques() == {"x", "y"}
        assert enc.mapping["x"] == 0
        assert enc.nclasses() == 2

    def test_integer_categories(self):
        enc = OrdinalEncoder().fit([10, 20, 10, 30])
        assert enc.transform([30, 10]) == [2, 0]

    def test_accepts_generator(self):
        enc = OrdinalEncoder().fit(c for c in "abca")
        assert enc.nclasses() == 3


class TestOrdinalTransform:
    def test_unknown_categories_dropped(self):
        enc = OrdinalEncoder().fit(DATA)
        data = ["hello", "mars", "world", "venus", "again"]
        t = enc.transform(data)
        assert t == [0, 1, 2]
        assert len(data) - len(t) == 2

    def test_unfitted_is_empty(self):
        enc = OrdinalEncoder()
        assert enc.transform(DATA).is_empty
        assert enc.nclasses() == 0
        assert enc.uniques() == set()

    def test_transform_does_not_mutate(self):
        enc = OrdinalEncoder().fit(["a"])
        enc.transform(["b", "c"])
        assert enc.uniques() == {"a"}


class TestOrdinalInverse:
    def test_round_trip(self):
        enc = OrdinalEncoder().fit(DATA)
        assert enc.inverse_transform(enc.transform(DATA)) == DATA

    def test_round_trip_with_unknowns(self):
        enc = OrdinalEncoder().fit(["a", "b"])
        data = ["a", "z", "b", "a"]
        assert enc.inverse_transform(enc.transform(data)) == ["a", "b", "a"]

    def test_collision_expands(self):
        enc = OrdinalEncoder().fit(DATA, Config(max_classes=3))
        assert enc.inverse_transform([2]) == ["again", "goodbye"]
        out = enc.inverse_transform(enc.transform(["goodbye"]))
        assert set(out) == {"again", "goodbye"}

    def test_raw_codes(self):
        enc = OrdinalEncoder().fit(DATA)
        assert enc.inverse_transform([3, 0]) == ["goodbye", "hello"]

    def test_numpy_codes(self):
        enc = OrdinalEncoder().fit(DATA)
        assert enc.inverse_transform(np.array([1, 2], dtype=np.uint64)) == ["world", "again"]

    def test_unknown_code_skipped(self):
        enc = OrdinalEncoder().fit(DATA)
        assert enc.inverse_transform([0, 99]) == ["hello"]

    def test_one_hot_transform_rejected(self):
        enc = OrdinalEncoder().fit(DATA)
        with pytest.raises(StrategyMismatchError, match="not compatible"):
            enc.inverse_transform(Transform(EncoderType.ONE_HOT, [(True, False)]))

    def test_custom_transform_rejected(self):
        enc = OrdinalEncoder().fit(DATA)
        with pytest.raises(StrategyMismatchError):
            enc.inverse_transform(Transform(EncoderType.CUSTOM_MAPPING, [0]))

    def test_bitvector_code_rejected(self):
        enc = OrdinalEncoder().fit(DATA)
        with pytest.raises(StrategyMismatchError, match="expected int"):
            enc.inverse_transform([(True, False)])

    def test_mismatch_is_type_error(self):
        enc = OrdinalEncoder().fit(DATA)
        with pytest.raises(TypeError):
            enc.inverse_transform(["hello"])

    def test_scalar_input_rejected(self):
        enc = OrdinalEncoder().fit(DATA)
        with pytest.raises(StrategyMismatchError, match="sequence of codes"):
            enc.inverse_transform(0)
