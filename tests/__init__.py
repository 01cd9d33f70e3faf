"""Test package for :mod:`feixing`."""
