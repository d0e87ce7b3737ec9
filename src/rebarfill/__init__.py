"""Rebarfill - Fill drawing regions with reinforcement bars.

Rebarfill is a CLI tool that takes a region-enclosing entity of a DXF drawing
(a hatch, a closed polyline, or anything that explodes into curves), sweeps
evenly spaced horizontal scan-lines across it and adds one bar per inside span
using the even-odd fill rule.

Example:
    $ rebarfill plan.dxf --clicks storage/clicks.json

This will create plan-rebar.dxf with bars added for the most recently
selected entity.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
