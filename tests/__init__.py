"""Test suite for create-tag.

This package contains test modules and fixtures for verifying the functionality
of the create-tag tool. It includes tests for:
- Tag classification and validation
- Version and temporary tag naming
- Base tag resolution and cleanup planning
- The interactive session and the command line

The test suite uses pytest and provides fixtures for common test scenarios.
"""
