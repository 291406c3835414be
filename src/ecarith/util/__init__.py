"""Utility functions shared by the field and curve implementations."""
