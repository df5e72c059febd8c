"""
Test Suite for the Console Simulators

- unit/: Unit tests for individual modules
- integration/: Full token streams driven through the console loop
- conftest.py: Shared pytest fixtures and configuration
"""
