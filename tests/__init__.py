"""Tests for value-converters."""
