"""Shared fixtures for tests."""

import pytest

from kervec.data.formats import SimpleExample, ExamplePair, Dataset
from kervec.representation.dictionary import FeatureDictionary, get_default_dictionary
from kervec.representation.dense import DenseVector
from kervec.representation.sparse import SparseVector


@pytest.fixture(autouse=True)
def clean_default_dictionary():
    """Keep the process-wide dictionary from leaking between tests."""
    dictionary = get_default_dictionary()
    snapshot = dictionary.snapshot()
    dictionary.reset()
    yield dictionary
    dictionary.restore(snapshot)


@pytest.fixture
def dictionary():
    """Private feature dictionary."""
    return FeatureDictionary()


@pytest.fixture
def dense_pair():
    """Two dense vectors of length 3."""
    return DenseVector([1.0, 2.0, 3.0]), DenseVector([4.0, 5.0, 6.0])


@pytest.fixture
def sparse_pair():
    """Two sparse vectors sharing the feature "dog"."""
    a = SparseVector.from_text("cat:1 dog:2")
    b = SparseVector.from_text("dog:1 fish:3")
    return a, b


@pytest.fixture
def bow_examples(sparse_pair):
    """Two examples with a bag-of-words representation."""
    a, b = sparse_pair
    return (
        SimpleExample(representations={"bow": a}, id="a"),
        SimpleExample(representations={"bow": b}, id="b"),
    )


@pytest.fixture
def multi_rep_example():
    """Example with two sparse and one dense representation."""
    return SimpleExample(
        representations={
            "rep1": SparseVector.from_text("a:1.0"),
            "rep2": SparseVector.from_text("b:3.0"),
            "emb": DenseVector([0.5, -1.0]),
        },
        id="multi"
    )


@pytest.fixture
def pair_dataset():
    """Dataset holding one simple example and one pair."""
    def make(i):
        return SimpleExample(
            representations={
                "rep1": SparseVector.from_text(f"a:{i}"),
                "rep2": SparseVector.from_text(f"b:{i + 1}"),
            },
            id=f"ex_{i}"
        )
    
    return Dataset(examples=[make(1), ExamplePair(left=make(2), right=make(3), id="pair")])
