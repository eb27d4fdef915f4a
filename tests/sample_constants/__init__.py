"""Importable classes and modules holding constants, used by the tests."""
