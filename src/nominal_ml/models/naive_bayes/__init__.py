"""Naive Bayes models package."""

from .naive_bayes import CountTable, NaiveBayesClassifier

__all__ = [
    "CountTable",
    "NaiveBayesClassifier",
]
