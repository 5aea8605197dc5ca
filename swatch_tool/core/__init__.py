"""swatch_tool.core — Foundation layer.

Contains the pixel grid, colour ranker, palette helpers, acquisition,
type definitions, and report builder. This module has NO dependencies on
swatch_tool.techniques or swatch_tool.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
