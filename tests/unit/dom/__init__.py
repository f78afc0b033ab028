"""
Tests for the document model.
"""
