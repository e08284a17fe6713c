"""Test helpers for impact curve tests."""

from tests.helpers.factories import make_params, make_symmetric_params

__all__ = ["make_params", "make_symmetric_params"]
