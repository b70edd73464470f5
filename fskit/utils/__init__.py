"""Utility subpackages for fskit."""
