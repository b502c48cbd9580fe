"""Test suite for secretcache.

Test structure:
- unit/: Unit tests - in-memory store, mocked loggers, moto-mocked AWS

No test touches a real AWS account; AWS credentials are faked per test.
"""
