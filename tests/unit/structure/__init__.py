"""
Tests for structure snapshots.
"""
