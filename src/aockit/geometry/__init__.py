"""Point arithmetic and sparse character grids."""

from __future__ import annotations
