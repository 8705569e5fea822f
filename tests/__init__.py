# ShaVault Test Suite
"""
Test suite including:
- Unit tests for each pipeline stage
- Known-vector and boundary tests
- Security tests (invalid inputs)
- CLI and configuration tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
