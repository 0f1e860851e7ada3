from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from graph_store.weights import Weight, is_weight, one_of, zero_of


class TestWeightContract:
    @pytest.mark.parametrize("value", [1, 2.5, Fraction(1, 2), Decimal("1.5"), np.float32(1), np.int64(3)])
    def test_numeric_types_are_weights(self, value):
        assert is_weight(value)
        assert isinstance(value, Weight)

    @pytest.mark.parametrize("value", [None, object(), True, "1", [1], (1,)])
    def test_non_numeric_values_are_not_weights(self, value):
        assert not is_weight(value)

    @pytest.mark.parametrize("value,zero,one", [
        (5, 0, 1),
        (2.5, 0.0, 1.0),
        (Fraction(3, 4), Fraction(0), Fraction(1)),
        (Decimal("7.1"), Decimal(0), Decimal(1)),
    ])
    def test_identities(self, value, zero, one):
        assert zero_of(value) == zero
        assert one_of(value) == one
        assert type(zero_of(value)) is type(value)
        assert value + zero_of(value) == value
        assert value * one_of(value) == value
