"""graphlp: two-variable linear programs solved by the graphical method."""

from .graph import solve, convex_hull, likely_unbounded, advise, parse_constraint

__all__ = ["solve", "convex_hull", "likely_unbounded", "advise", "parse_constraint"]
