"""Unit tests for blood type compatibility lookup"""

import pytest
from bloodbank_gateway.domain.models import BloodType
from bloodbank_gateway.domain.compatibility import (
    compatible_donor_types,
    compatible_recipient_types,
    parse_blood_type,
    sort_blood_types,
)
from bloodbank_gateway.domain.exceptions import InvalidBloodType, DomainException


@pytest.mark.parametrize("recipient", list(BloodType))
def test_every_recipient_accepts_universal_donor_and_own_type(recipient: BloodType):
    """O- and the recipient's own type are always compatible"""
    donors = compatible_donor_types(recipient)
    assert BloodType.O_NEG in donors
    assert recipient in donors


def test_universal_recipient_and_universal_donor_cardinality():
    assert compatible_donor_types("AB+") == frozenset(BloodType)
    assert len(compatible_donor_types("AB+")) == 8
    assert compatible_donor_types("O-") == {BloodType.O_NEG}


def test_table_entries():
    """Spot-check the negative/positive split"""
    assert compatible_donor_types("A+") == {"O-", "O+", "A-", "A+"}
    assert compatible_donor_types("B-") == {"O-", "B-"}
    assert compatible_donor_types("AB-") == {"O-", "A-", "B-", "AB-"}


def test_parse_blood_type_normalizes_input():
    assert parse_blood_type(" ab+ ") == BloodType.AB_POS
    assert parse_blood_type("O−") == BloodType.O_NEG  # Unicode minus sign
    assert parse_blood_type(BloodType.B_POS) is BloodType.B_POS


@pytest.mark.parametrize("value", ["", "C+", "A", "AB", "0-", None, 5])
def test_unknown_recipient_type_raises(value):
    """No silent fallback to exact-match for malformed types"""
    with pytest.raises(InvalidBloodType):
        compatible_donor_types(value)


def test_invalid_blood_type_is_domain_exception():
    assert issubclass(InvalidBloodType, DomainException)


def test_compatible_recipient_types_inverse_lookup():
    """O- gives to everyone, AB+ only to AB+"""
    assert compatible_recipient_types("O-") == frozenset(BloodType)
    assert compatible_recipient_types("AB+") == {BloodType.AB_POS}
    assert compatible_recipient_types("O+") == {"O+", "A+", "B+", "AB+"}


def test_sort_blood_types_uses_declaration_order():
    assert sort_blood_types({BloodType.AB_POS, BloodType.O_NEG, BloodType.A_POS}) == [
        BloodType.O_NEG,
        BloodType.A_POS,
        BloodType.AB_POS,
    ]
