"""Competitive-programming techniques and small data structures.

Prefix sums, monotonic stacks and queues, bracket checks, expression
evaluation, order statistics, interval DP, combinatorics and Nim.
"""

__version__ = "0.1.0"