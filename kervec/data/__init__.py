"""Example and dataset structures."""

from .formats import Example, SimpleExample, ExamplePair, Dataset

__all__ = ["Example", "SimpleExample", "ExamplePair", "Dataset"]
