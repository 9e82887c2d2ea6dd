"""Adversle: a word-guessing game whose hidden word dodges every guess."""

__version__ = "0.1.0"
