"""
Test package for unittesting.

Test Organization:
    unit/: Unit tests for individual components
    conftest.py: Pytest configuration and shared fixtures
"""
