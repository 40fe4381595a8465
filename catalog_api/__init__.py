"""Catalog API.

Product catalog CRUD service with a client-side query pipeline for
searching, sorting and paginating products.
"""

__version__ = "0.1.0"
