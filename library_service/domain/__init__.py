"""
Domain layer package.

Contains pure business logic: entities, validators, errors and
port interfaces. No framework imports, no IO.
"""
