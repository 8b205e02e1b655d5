"""
Tests for the Excel Parser module.

This package contains the tests for workbook decoding, cell value
normalization, item and metadata extraction, and village/district assembly.
"""
