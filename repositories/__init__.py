"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive an injected Database handle, build parameterized
statements, and return plain dicts keyed by API field names.
"""
