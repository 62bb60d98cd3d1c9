"""
Core number string format model.

This module contains the foundational building blocks: the error hierarchy,
the immutable format specification models, text helpers and JSON contract
validators. It has no dependency on the builder, render or country layers.
"""
