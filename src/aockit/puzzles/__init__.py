"""Puzzle registration, sample tables and the sample-checked runner.

Puzzles register on a :class:`~aockit.puzzles.registry.PuzzleRegistry`;
:class:`~aockit.puzzles.runner.PuzzleRunner` checks each against its
sample before running it on real input.
"""

from __future__ import annotations
