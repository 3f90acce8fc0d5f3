"""Puzzle input retrieval and line scanning."""

from __future__ import annotations
