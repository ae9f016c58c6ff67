"""Classic data structures and algorithms: bounded stack and queue, adjacency-matrix graph, divide-and-conquer maximum, greedy knapsack."""

__version__ = "0.1.0"
__all__ = ["containers", "graph", "findmax", "knapsack"]