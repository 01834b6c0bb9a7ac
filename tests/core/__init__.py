"""Tests for the core distance transform."""
