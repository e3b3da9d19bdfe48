"""
Tests for the top-level fermat namespace
"""

import fermat
from fermat import Circle, Matrix, Point, intersect, set_precision, using_precision


class TestPublicApi:
    """Everything in __all__ is importable from the package root"""

    def test_all_names_resolve(self):
        for name in fermat.__all__:
            assert hasattr(fermat, name), name

    def test_version(self):
        assert fermat.__version__ == "0.1.0"

    def test_end_to_end(self):
        with using_precision(1e-9):
            (p,) = intersect(Circle(), Circle(c=Point(x=2, y=0)))
        assert p == Point(x=1.0, y=0.0)
        assert Matrix.identity(3).determinant() == 1.0
        assert set_precision().tolerance == 1e-6
