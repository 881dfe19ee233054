"""Tests for SparseVector and vector merging."""

import pytest

from kervec.data.formats import Example
from kervec.exceptions import (
    MissingRepresentationError,
    ParseError,
    TypeMismatchError,
    UnsupportedVariantError,
)
from kervec.representation.base import Vector
from kervec.representation.dense import DenseVector
from kervec.representation.sparse import SparseVector
from kervec.representation.utils import (
    merge_vectors,
    add_merged_representation,
    add_merged_representation_to_dataset,
)


def test_empty_vector_reads_zero():
    v = SparseVector()
    assert isinstance(v, Vector)
    assert len(v) == 0
    assert v.get_feature_value(12345) == 0.0
    assert v.get_feature_value_by_name("anything") == 0.0


def test_inner_product(sparse_pair):
    """Only shared features contribute."""
    a, b = sparse_pair
    assert a.inner_product(b) == 2.0
    assert b.inner_product(a) == 2.0
    assert a.inner_product(SparseVector()) == 0.0


def test_linearity(sparse_pair):
    a, b = sparse_pair
    ab = a.inner_product(b)
    a.scale(-3.0)
    assert a.inner_product(b) == pytest.approx(-3.0 * ab)


def test_scale_keeps_zeroed_entries(sparse_pair):
    a, _ = sparse_pair
    a.scale(0.0)
    assert len(a) == 2
    assert a.get_active_features() == {"cat": 0.0, "dog": 0.0}


def test_add_variants(sparse_pair):
    a, b = sparse_pair
    
    a.add(b)
    assert a.get_active_features() == {"cat": 1.0, "dog": 3.0, "fish": 3.0}
    
    a.add(b, -1.0)
    assert a.get_active_features() == {"cat": 1.0, "dog": 2.0, "fish": 0.0}
    
    a.add(b, 1.0, self_coeff=2.0)
    assert a.get_active_features() == {"cat": 2.0, "dog": 5.0, "fish": 3.0}


def test_add_self(sparse_pair):
    a, _ = sparse_pair
    a.add(a)
    assert a.get_active_features() == {"cat": 2.0, "dog": 4.0}


def test_zero_vector_is_additive_identity(sparse_pair):
    a, _ = sparse_pair
    expected = a.get_active_features()
    
    zero = a.get_zero_vector()
    assert isinstance(zero, SparseVector)
    assert len(zero) == 0
    assert zero.dictionary is a.dictionary
    
    a.add(zero)
    assert a.get_active_features() == expected


def test_normalize(sparse_pair):
    a, _ = sparse_pair
    a.normalize()
    assert a.get_squared_norm() == pytest.approx(1.0)
    
    zero = SparseVector()
    zero.normalize()
    assert len(zero) == 0


def test_text_round_trip():
    v = SparseVector.from_text("w:0.1 x:-2.5 y:1e-08")
    parsed = SparseVector.from_text(v.get_text_from_data())
    
    assert parsed.get_active_features() == pytest.approx(v.get_active_features())
    assert str(SparseVector.from_text("a:1")) == "a:1.0"


def test_names_may_contain_separator():
    v = SparseVector.from_text("http://x:2.0")
    assert v.get_active_features() == {"http://x": 2.0}


def test_set_data_from_text_replaces_content():
    v = SparseVector.from_text("a:1 b:2")
    v.set_data_from_text("c:3")
    assert v.get_active_features() == {"c": 3.0}
    v.set_data_from_text("   ")
    assert len(v) == 0


@pytest.mark.parametrize("text", ["a1", ":1.0", "a:1 b:x"])
def test_parse_errors(text, clean_default_dictionary):
    with pytest.raises(ParseError):
        SparseVector.from_text(text)
    # Nothing registered on failure
    assert len(clean_default_dictionary) == 0


def test_equality(sparse_pair, dictionary):
    a, b = sparse_pair
    assert a == SparseVector.from_text("dog:2 cat:1")
    assert a != b
    assert a == SparseVector.from_text("cat:1 dog:2", dictionary=dictionary)
    assert a != DenseVector([1.0, 2.0])


def test_type_mismatches(sparse_pair, dictionary):
    a, _ = sparse_pair
    
    with pytest.raises(TypeMismatchError):
        a.inner_product(DenseVector([1.0]))
    with pytest.raises(TypeMismatchError):
        a.add(DenseVector([1.0]))
    with pytest.raises(TypeMismatchError):
        a.inner_product(SparseVector.from_text("cat:1", dictionary=dictionary))


def test_merge_prefixes_and_scales():
    target = SparseVector()
    target.merge(SparseVector.from_text("a:1.0"), 2.0, "rep1")
    target.merge(SparseVector.from_text("b:3.0"), 0.5, "rep2")
    
    assert target.get_active_features() == {"rep1_a": 2.0, "rep2_b": 1.5}


def test_merge_overwrites():
    target = SparseVector()
    target.merge(SparseVector.from_text("a:1.0"), 1.0, "rep")
    target.merge(SparseVector.from_text("a:5.0"), 1.0, "rep")
    
    assert target.get_active_features() == {"rep_a": 5.0}


def test_merge_vectors(multi_rep_example):
    merged = merge_vectors(multi_rep_example, ["rep1", "rep2"], [2.0, 0.5])
    assert merged.get_active_features() == {"rep1_a": 2.0, "rep2_b": 1.5}


def test_merge_vectors_from_dense(multi_rep_example):
    merged = merge_vectors(multi_rep_example, ["emb", "rep1"], [2.0, 1.0])
    assert merged.get_active_features() == {"emb_0": 1.0, "emb_1": -2.0, "rep1_a": 1.0}


def test_merge_vectors_validation(multi_rep_example):
    with pytest.raises(ValueError):
        merge_vectors(multi_rep_example, ["rep1", "rep2"], [1.0])
    with pytest.raises(MissingRepresentationError):
        merge_vectors(multi_rep_example, ["nope"], [1.0])
    
    multi_rep_example.representations["raw"] = "just text"
    with pytest.raises(MissingRepresentationError):
        merge_vectors(multi_rep_example, ["raw"], [1.0])


def test_add_merged_representation(multi_rep_example):
    add_merged_representation(multi_rep_example, ["rep1", "rep2"], [2.0, 0.5], "combo")
    combo = multi_rep_example.get_representation("combo")
    assert combo.get_active_features() == {"rep1_a": 2.0, "rep2_b": 1.5}
    
    with pytest.warns(UserWarning):
        add_merged_representation(multi_rep_example, ["rep1"], [1.0], "combo")


def test_add_merged_representation_to_dataset(pair_dataset):
    add_merged_representation_to_dataset(pair_dataset, ["rep1", "rep2"], [1.0, 1.0], "combo")
    
    simple, pair = pair_dataset.examples
    assert simple.get_representation("combo").get_active_features() == {
        "rep1_a": 1.0, "rep2_b": 2.0
    }
    assert pair.get_left_example().get_representation("combo").get_active_features() == {
        "rep1_a": 2.0, "rep2_b": 3.0
    }
    assert pair.get_right_example().get_representation("combo").get_active_features() == {
        "rep1_a": 3.0, "rep2_b": 4.0
    }


def test_unsupported_example_kind(pair_dataset):
    class OtherExample(Example):
        pass
    
    pair_dataset.add_example(OtherExample())
    with pytest.raises(UnsupportedVariantError):
        add_merged_representation_to_dataset(pair_dataset, ["rep1"], [1.0], "combo")
    
    # Examples before the failure were already updated
    first = pair_dataset.examples[0]
    assert "combo" in first.representations
