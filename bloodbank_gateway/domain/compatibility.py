"""Blood type compatibility lookup for donor matching"""

from typing import Dict, FrozenSet, Iterable, List, Union
from bloodbank_gateway.domain.models import BloodType
from bloodbank_gateway.domain.exceptions import InvalidBloodType

O_NEG, O_POS = BloodType.O_NEG, BloodType.O_POS
A_NEG, A_POS = BloodType.A_NEG, BloodType.A_POS
B_NEG, B_POS = BloodType.B_NEG, BloodType.B_POS
AB_NEG, AB_POS = BloodType.AB_NEG, BloodType.AB_POS

# Key = recipient blood type, value = donor types that may supply it
BLOOD_COMPATIBILITY: Dict[BloodType, FrozenSet[BloodType]] = {
    O_NEG: frozenset({O_NEG}),
    O_POS: frozenset({O_NEG, O_POS}),
    A_NEG: frozenset({O_NEG, A_NEG}),
    A_POS: frozenset({O_NEG, O_POS, A_NEG, A_POS}),
    B_NEG: frozenset({O_NEG, B_NEG}),
    B_POS: frozenset({O_NEG, O_POS, B_NEG, B_POS}),
    AB_NEG: frozenset({O_NEG, A_NEG, B_NEG, AB_NEG}),
    AB_POS: frozenset(BloodType),  # Universal recipient
}


def parse_blood_type(value: Union[str, BloodType]) -> BloodType:
    """
    Normalize a blood type string.

    Accepts "ab+", " O- " and the Unicode minus sign ("O−").

    Raises:
        InvalidBloodType: If the value is not one of the eight groups
    """
    if isinstance(value, BloodType):
        return value
    if not isinstance(value, str):
        raise InvalidBloodType(f"Blood type must be a string, got {type(value).__name__}")

    normalized = value.strip().upper().replace("−", "-")
    try:
        return BloodType(normalized)
    except ValueError:
        raise InvalidBloodType(f"Unknown blood type: {value!r}") from None


def compatible_donor_types(recipient_type: Union[str, BloodType]) -> FrozenSet[BloodType]:
    """Donor blood types that can safely give to the recipient type"""
    return BLOOD_COMPATIBILITY[parse_blood_type(recipient_type)]


def compatible_recipient_types(donor_type: Union[str, BloodType]) -> FrozenSet[BloodType]:
    """Recipient blood types the donor type can give to (inverse of the table)"""
    donor = parse_blood_type(donor_type)
    return frozenset(
        recipient for recipient, donors in BLOOD_COMPATIBILITY.items() if donor in donors
    )


def sort_blood_types(types: Iterable[BloodType]) -> List[BloodType]:
    """Order blood types by their enum declaration order"""
    order = list(BloodType)
    return sorted(types, key=order.index)
