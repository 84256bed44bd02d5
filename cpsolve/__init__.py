"""Competitive-programming problem solutions, a disjoint-set, binary search and a token scanner."""

__version__ = "0.1.0"