"""
Version 1 of the API.

This subpackage bundles the student and group endpoints.  It is
mounted under ``settings.api_prefix`` (``/api`` by default) to keep
the paths clients already use.
"""
