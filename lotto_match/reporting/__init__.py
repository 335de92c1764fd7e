"""
lotto_match.reporting: terminal formatting for search output.

Modules:
  formatters: Highlighters, match line builder, banner and summary messages.
"""
