"""Route blueprints package for the sample pages.

Holds the blueprint that lists the samples and dispatches the
``action`` query parameter to the matching sample.
"""
