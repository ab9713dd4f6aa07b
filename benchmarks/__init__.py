"""Performance benchmarks for tinygraph.

This package contains microbenchmarks comparing the edge-list and
adjacency-matrix representations under the shared algorithms.
"""
