"""Fakes and builders shared by the unit tests."""
