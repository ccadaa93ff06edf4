"""
funcdemo - Functional Feature Example Runner

Runs a fixed set of small, independent demonstrations of functional-style
language features (predicates, transforms, aggregation, stream pipelines,
optional values, date/time handling) and writes each result to an output
sink as labelled lines.
"""

__version__ = "0.1.0"
__author__ = "funcdemo Team"
