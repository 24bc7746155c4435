"""
Domain layer package.

Contains pure business logic: entities, outcomes, geo math
and port interfaces. No framework imports, no IO.
"""
