"""lotto-match: rank lottery draw records by positional matches against chosen numbers."""

__version__ = "0.1.0"
