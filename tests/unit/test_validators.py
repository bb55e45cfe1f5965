"""
Unit tests for request field validators.
"""

import re
import pytest
from decimal import Decimal

from alubill.exceptions import BusinessLogicError
from alubill.utils.validators import (
    required,
    email,
    phone,
    positive_number,
    non_negative_number,
    decimal_places,
    min_length,
    max_length,
    number_in_range,
    optional,
    validate_schema,
    ensure_valid,
)


class TestFieldChecks:
    """Tests for the single-value checks."""

    @pytest.mark.parametrize('value,expected', [
        (None, False),
        ('', False),
        ('   ', False),
        ([], False),
        ('x', True),
        (0, True),
        ([1], True),
    ])
    def test_required(self, value, expected):
        assert required(value) is expected

    def test_email(self):
        assert email('sales@alutraders.pk')
        assert not email('sales@alutraders')
        assert not email('two words@x.pk')
        assert not email(None)

    def test_phone(self):
        assert phone('0300-1234567')
        assert phone('+92 300 1234567') is False
        assert phone('92 300 1234567')
        assert not phone('12345')
        assert not phone('0300-123456a')

    @pytest.mark.parametrize('value,positive,non_negative', [
        (5, True, True),
        ('2.5', True, True),
        (Decimal('0'), False, True),
        (0, False, True),
        (-1, False, False),
        ('abc', False, False),
        ('', False, False),
        (None, False, False),
        (True, False, False),
        (float('nan'), False, False),
        ('۵', False, False),
    ])
    def test_numbers(self, value, positive, non_negative):
        assert positive_number(value) is positive
        assert non_negative_number(value) is non_negative

    @pytest.mark.parametrize('value,places,expected', [
        ('12', 2, True),
        ('12.5', 2, True),
        ('12.50', 2, True),
        ('12.505', 2, False),
        ('12.505', 3, True),
        (12.5, 2, True),
        ('-1', 2, False),
        ('1.', 2, False),
        (None, 2, False),
    ])
    def test_decimal_places(self, value, places, expected):
        assert decimal_places(value, places) is expected

    def test_lengths(self):
        assert min_length('PO', 2)
        assert not min_length('P', 2)
        assert max_length('PO', 2)
        assert not max_length('PINV', 2)

    def test_number_in_range(self):
        assert number_in_range(10, 0, 100)
        assert number_in_range('100', 0, 100)
        assert not number_in_range(100.01, 0, 100)
        assert not number_in_range('x', 0, 100)


class TestValidateSchema:
    """Tests for schema validation."""

    schema = {
        'itemName': {'required': True},
        'unit': {'pattern': re.compile(r'ft|kg|pcs')},
        'quantity': {'custom': optional(positive_number, 'Quantity must be more than 0')},
    }

    def test_valid(self):
        assert validate_schema({'itemName': 'Angle', 'unit': 'ft', 'quantity': 3}, self.schema) == {}

    def test_default_messages(self):
        errors = validate_schema({'unit': 'yard'}, self.schema)
        assert errors == {
            'itemName': 'itemName is required',
            'unit': 'unit has invalid format',
        }

    def test_custom_message(self):
        errors = validate_schema({'itemName': 'Angle', 'quantity': 0}, self.schema)
        assert errors == {'quantity': 'Quantity must be more than 0'}

    def test_optional_field_may_be_missing(self):
        assert validate_schema({'itemName': 'Angle', 'quantity': ''}, self.schema) == {}

    def test_required_stops_other_checks(self):
        schema = {'prefix': {'required': True, 'message': 'Pick a series', 'custom': lambda v, d: 'never'}}
        assert validate_schema({}, schema) == {'prefix': 'Pick a series'}

    def test_pattern_skips_non_strings(self):
        assert validate_schema({'unit': 5}, {'unit': self.schema['unit']}) == {}

    def test_custom_sees_whole_record(self):
        schema = {
            'received': {
                'custom': lambda value, data: 'More than ordered' if value > data['ordered'] else None,
            },
        }
        assert validate_schema({'ordered': 5, 'received': 7}, schema) == {'received': 'More than ordered'}
        assert validate_schema({'ordered': 5, 'received': 5}, schema) == {}


def test_ensure_valid_raises_with_errors():
    with pytest.raises(BusinessLogicError) as excinfo:
        ensure_valid({}, {'prefix': {'required': True}})

    assert excinfo.value.status_code == 400
    assert excinfo.value.to_dict()['errors'] == {'prefix': 'prefix is required'}
    assert excinfo.value.message == 'prefix is required'


def test_ensure_valid_passes():
    assert ensure_valid({'prefix': 'PO'}, {'prefix': {'required': True}}) is None
