"""
Ingestion layer: draw file discovery and line parsing.

Submodules:
  sources  : Locate draw files in a directory and read their lines
  draw_csv : Parse ``;``-delimited draw lines and score positional matches
"""
