"""
Matching layer: ranks scored draw lines and drives full scans.

Modules
-------
ranker  : ranking_key() + compare_results() + rank_results(): pure, no I/O.
scanner : SourceScan / ScanSummary + scan_lines() + scan_sources() + run_search().
"""
