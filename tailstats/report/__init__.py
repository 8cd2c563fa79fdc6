"""Presentation glue: tabular views, text summaries and charts.

Nothing here computes statistics; every function consumes values produced by
`tailstats.core`.
"""
