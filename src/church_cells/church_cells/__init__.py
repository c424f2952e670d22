"""Church cells package.

This package is organized by feature modules (cells, reports, members) with
repository and service layers. The HTTP layer lives outside this package.
"""
