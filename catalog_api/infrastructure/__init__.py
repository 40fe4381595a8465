"""Infrastructure module.

Configuration, database access and logging setup.
"""
