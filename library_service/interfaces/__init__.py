"""
Interfaces layer package.

Entry points that callers use to obtain a wired Library.
No business logic belongs here.
"""
