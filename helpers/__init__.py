"""
helpers/ - SQL Helpers
======================
Statement-building utilities shared by the repositories.
"""
