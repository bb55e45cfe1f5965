"""
Unit tests for number coercion helpers.
"""

import pytest
from decimal import Decimal

from alubill.utils.number_format import safe_number, round2, quantize, parse_leading_zero


class TestSafeNumber:
    """Tests for safe_number."""

    @pytest.mark.parametrize('value,expected', [
        (None, '0'),
        ('', '0'),
        ('   ', '0'),
        ('abc', '0'),
        ('12abc', '0'),
        (True, '0'),
        ([], '0'),
        ({}, '0'),
        (float('nan'), '0'),
        (float('inf'), '0'),
        ('NaN', '0'),
        ('-Infinity', '0'),
        (5, '5'),
        (2.5, '2.5'),
        (Decimal('7.25'), '7.25'),
        (' 42 ', '42'),
        ('1,234.50', '1234.50'),
        ('-3.5', '-3.5'),
    ])
    def test_coercion(self, value, expected):
        assert safe_number(value) == Decimal(expected)

    def test_float_uses_shortest_repr(self):
        assert safe_number(0.1) == Decimal('0.1')


class TestRound2:
    """Tests for round2."""

    @pytest.mark.parametrize('value,expected', [
        ('1.005', '1.01'),
        ('1.004', '1.00'),
        ('-1.005', '-1.01'),
        (2.675, '2.68'),
        (None, '0.00'),
        ('x', '0.00'),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        assert round2(value) == Decimal(expected)

    def test_two_places(self):
        assert str(round2(3)) == '3.00'


@pytest.mark.parametrize('value,expected', [
    ('07', '7'),
    (3, '3'),
    ('', '0'),
    ('x', '0'),
    ('07abc', '7'),
    (' 12.5 kg', '12.5'),
    ('-.5', '-0.5'),
    ('1e3ft', '1000'),
    ('1,200', '1'),
    ('abc7', '0'),
    ('Infinity', '0'),
])
def test_parse_leading_zero(value, expected):
    assert parse_leading_zero(value) == Decimal(expected)


class TestLargeAndForeignInput:
    """Tests for magnitudes past the default Decimal precision and non-ASCII digits."""

    def test_round2_huge_value(self):
        assert round2('1e30') == Decimal('1000000000000000000000000000000.00')
        assert round2(Decimal('123456789012345678901234567.895')) == Decimal('123456789012345678901234567.90')

    def test_round2_near_double_limit(self):
        assert round2(1.7e308) == Decimal('1.7e308')

    def test_beyond_double_range_is_zero(self):
        assert safe_number('1e400') == Decimal('0')
        assert safe_number('-1e999') == Decimal('0')
        assert safe_number(10 ** 400) == Decimal('0')
        assert safe_number('1e-400') == Decimal('0')

    def test_arabic_indic_digits_are_zero(self):
        assert safe_number('۴۲') == Decimal('0')
        assert safe_number('٣') == Decimal('0')

    def test_quantize_other_exponent(self):
        assert quantize(Decimal('1e40'), Decimal('1')) == Decimal('1e40')
        assert quantize(Decimal('2.5'), Decimal('1')) == Decimal('3')
