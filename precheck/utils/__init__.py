"""Utilities for precheck."""
