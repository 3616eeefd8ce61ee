"""Unit test configuration.

Unit tests exercise domain, application, infrastructure and resolver
modules directly; only tests/test_*.py go through app.py.
"""
