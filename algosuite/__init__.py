"""Array, string, grid, distance, robot, jump, query, connectivity and linked-structure algorithms."""

__version__ = "0.1.0"