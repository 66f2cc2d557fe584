"""
Morabox - Simulation, solver and generator for the Mora Jai puzzle box.

Subpackages:
    - morabox.engine: colors, grid, tile effects, bounded BFS solver
    - morabox.puzzles: puzzle generation, daily schedule, share codes
"""

__version__ = "0.1.0"
