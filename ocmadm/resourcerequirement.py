"""Resource quantities and the resource requirement of an operator."""

from __future__ import annotations

import decimal
import enum
import functools
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

_CTX = decimal.Context(prec=200)

_FORMAT_ERROR = (
    "quantities must match the regular expression "
    "'^([+-]?[0-9.]+)([eEinumkKMGTP]*[-+]?[0-9]*)$'"
)
_QUANTITY_RE = re.compile(
    r"^([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))([eEinumkKMGTP]*[-+]?[0-9]*)$"
)
_EXPONENT_RE = re.compile(r"^[eE]([-+]?[0-9]+)$")

_DECIMAL_SUFFIXES = {"n": -9, "u": -6, "m": -3, "": 0, "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18}
_DECIMAL_BY_EXP = {exp: suffix for suffix, exp in _DECIMAL_SUFFIXES.items()}
_BINARY_SUFFIXES = {"Ki": 10, "Mi": 20, "Gi": 30, "Ti": 40, "Pi": 50, "Ei": 60}
_BINARY_BY_STEP = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei"]

DECIMAL_SI = "DecimalSI"
BINARY_SI = "BinarySI"
DECIMAL_EXPONENT = "DecimalExponent"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Quantity:
    """An exact amount with the notation it was written in."""

    value: Decimal
    format: str = DECIMAL_SI

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def _decimal_parts(self) -> tuple[int, int]:
        scaled = self.value.scaleb(9, context=_CTX)
        mantissa = int(scaled.to_integral_value(rounding=decimal.ROUND_UP))
        exponent = -9
        while mantissa != 0 and exponent < 18 and mantissa % 1000 == 0:
            mantissa //= 1000
            exponent += 3
        if mantissa == 0:
            exponent = 0
        return mantissa, exponent

    def __str__(self) -> str:
        if self.format == BINARY_SI:
            value = self.value
            if value == value.to_integral_value() and abs(value) >= 1024:
                number = int(value)
                step = 0
                while step < len(_BINARY_BY_STEP) - 1 and number % 1024 == 0:
                    number //= 1024
                    step += 1
                return f"{number}{_BINARY_BY_STEP[step]}"
        mantissa, exponent = self._decimal_parts()
        if self.format == DECIMAL_EXPONENT:
            return f"{mantissa}" if exponent == 0 else f"{mantissa}e{exponent}"
        return f"{mantissa}{_DECIMAL_BY_EXP[exponent]}"


def parse_quantity(text: str) -> Quantity:
    """Parse a quantity such as "100m", "256Mi" or "1e3"; raise ValueError if malformed."""
    match = _QUANTITY_RE.match(text.strip()) if text else None
    if match is None:
        raise ValueError(_FORMAT_ERROR)
    number = Decimal(match.group(1))
    suffix = match.group(2)
    if suffix in _DECIMAL_SUFFIXES:
        return Quantity(number.scaleb(_DECIMAL_SUFFIXES[suffix], context=_CTX), DECIMAL_SI)
    if suffix in _BINARY_SUFFIXES:
        return Quantity(_CTX.multiply(number, Decimal(2 ** _BINARY_SUFFIXES[suffix])), BINARY_SI)
    exponent = _EXPONENT_RE.match(suffix)
    if exponent is not None:
        return Quantity(number.scaleb(int(exponent.group(1)), context=_CTX), DECIMAL_EXPONENT)
    raise ValueError("unable to parse quantity's suffix")


class ResourceQosClass(str, enum.Enum):
    """How the resources of an operator's pods are set."""

    DEFAULT = "Default"
    BEST_EFFORT = "BestEffort"
    RESOURCE_REQUIREMENT = "ResourceRequirement"

    def __str__(self) -> str:
        return self.value


@dataclass
class ResourceRequirement:
    """A QoS class and, for ResourceRequirement, the limits and requests."""

    type: ResourceQosClass | str | None = None
    limits: dict[str, Quantity] | None = None
    requests: dict[str, Quantity] | None = None


def _coerce_type(resource_type: ResourceQosClass | str | None) -> ResourceQosClass | str | None:
    if not resource_type:
        return None
    try:
        return ResourceQosClass(resource_type)
    except ValueError:
        return resource_type


def ensure_quantity(limits: Mapping[str, Quantity], requests: Mapping[str, Quantity]) -> None:
    """Raise ValueError if any request is larger than the limit for it."""
    for resource, limit in limits.items():
        request = requests.get(resource)
        if request is None or request <= limit:
            continue
        raise ValueError(f"requests {request} must be less than or equal to limits {limit}")


def new_resource_requirement(
    resource_type: ResourceQosClass | str | None,
    limits: Mapping[str, str] | None,
    requests: Mapping[str, str] | None,
) -> ResourceRequirement:
    """Build a resource requirement, checking the type against what is set."""
    limits = limits or {}
    requests = requests or {}
    rtype = _coerce_type(resource_type)
    if not limits and not requests:
        if rtype == ResourceQosClass.RESOURCE_REQUIREMENT:
            raise ValueError(
                f"resource type is {rtype} but both limits and requests are not set"
            )
        return ResourceRequirement(type=rtype)
    if rtype is None:
        rtype = ResourceQosClass.RESOURCE_REQUIREMENT
    elif rtype != ResourceQosClass.RESOURCE_REQUIREMENT:
        raise ValueError(
            f"resource type must be {ResourceQosClass.RESOURCE_REQUIREMENT} "
            "when resource limits or requests are set"
        )
    parsed_limits = {name: parse_quantity(text) for name, text in limits.items()}
    parsed_requests = {name: parse_quantity(text) for name, text in requests.items()}
    ensure_quantity(parsed_limits, parsed_requests)
    return ResourceRequirement(type=rtype, limits=parsed_limits, requests=parsed_requests)