"""Tests for sampling utilities."""

import math

import numpy as np
import pandas as pd
import pytest

from expression import MathExpression
from utils import sample_grid, sign_change_brackets, tabulate


class TestSampleGrid:

    def test_includes_endpoints(self) -> None:
        np.testing.assert_allclose(sample_grid(0, 1, 5), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_default_size(self) -> None:
        assert len(sample_grid(0, 1)) == 201

    def test_too_few_points(self) -> None:
        with pytest.raises(ValueError):
            sample_grid(0, 1, 1)


class TestTabulate:

    def test_series_shape(self) -> None:
        table = tabulate(MathExpression("2*x"), 0, 1, 3)
        assert isinstance(table, pd.Series)
        assert table.name == "f(x)"
        assert table.index.name == "x"
        assert list(table.index) == [0.0, 0.5, 1.0]
        assert list(table) == [0.0, 1.0, 2.0]

    def test_constant_expression(self) -> None:
        table = tabulate(MathExpression("3"), -1, 1, 4)
        assert list(table) == [3.0] * 4

    def test_infinite_values_kept(self) -> None:
        table = tabulate(MathExpression("1/x"), -1, 1, 3)
        assert table.iloc[1] == math.inf


class TestSignChangeBrackets:

    def test_brackets(self) -> None:
        brackets = sign_change_brackets([0, 1, 2, 3], [1.0, -1.0, -1.0, 2.0])
        assert brackets == [(0.0, 1.0), (2.0, 3.0)]

    def test_zero_is_not_a_sign_change(self) -> None:
        assert sign_change_brackets([0, 1, 2], [-1.0, 0.0, 1.0]) == []

    def test_non_finite_samples_skipped(self) -> None:
        assert sign_change_brackets([0, 1, 2], [1.0, np.nan, -1.0]) == []
        assert sign_change_brackets([0, 1], [-np.inf, 1.0]) == []

    def test_short_input(self) -> None:
        assert sign_change_brackets([0], [1.0]) == []

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            sign_change_brackets([0, 1], [1.0])
