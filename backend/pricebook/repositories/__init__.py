"""
Data-access functions.

Repositories shape queries and nothing else: they return None for absence
and let storage errors (e.g. IntegrityError) propagate unmodified.
"""
