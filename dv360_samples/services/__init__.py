"""Service layer package.

Builds the authenticated API client the samples are constructed with.
"""
