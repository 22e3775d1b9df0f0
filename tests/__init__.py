"""Test suite for Version Tagger.

This package contains test modules and fixtures for verifying the functionality
of the Version Tagger tool. It includes tests for:
- Version file resolution and tag allocation
- Git remote operations and dry run behaviour
- Check and tagging runs over multiple Version files
- Configuration handling and the CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""
