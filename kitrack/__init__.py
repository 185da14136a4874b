"""Hits, segments, segment connection criteria and greedy subset selection for track finding."""

__version__ = "0.1.0"