"""
Tests for selector synthesis.
"""
