"""
AstroMind core: telemetry simulation, advisory rules and A* route planning.
"""

__version__ = "1.0.0"
