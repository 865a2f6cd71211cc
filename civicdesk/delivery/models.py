"""Records of the delivery company: couriers and packages."""

from __future__ import annotations

from dataclasses import dataclass

from civicdesk.text import tokenize, trim


def _int_pair(text: str, what: str) -> tuple[int, int]:
    parts = tokenize(trim(text), ",")
    if len(parts) != 2:
        raise ValueError(f"malformed {what}: {text!r}")
    return int(trim(parts[0])), int(trim(parts[1]))


@dataclass(frozen=True)
class Courier:
    """A courier with the streets they serve and a circular zone."""

    name: str
    streets: tuple[str, ...]
    center: tuple[int, int]
    radius: int

    @classmethod
    def parse(cls, line: str) -> Courier:
        """Read ``name ; street, street, ... ; latitude, longitude, radius``."""
        fields = tokenize(line, ";")
        if len(fields) != 3:
            raise ValueError(f"malformed courier: {line!r}")
        streets = tuple(trim(street) for street in tokenize(trim(fields[1]), ","))
        zone = tokenize(trim(fields[2]), ",")
        if len(zone) != 3:
            raise ValueError(f"malformed courier zone: {fields[2]!r}")
        latitude, longitude, radius = (int(trim(part)) for part in zone)
        return cls(trim(fields[0]), streets, (latitude, longitude), radius)


@dataclass
class Package:
    """A package for a recipient at a street address and map location."""

    recipient: str
    address: tuple[str, int]
    location: tuple[int, int]
    delivered: bool = False

    @classmethod
    def parse(cls, line: str) -> Package:
        """Read ``recipient;street,number;latitude,longitude;status``."""
        fields = tokenize(line, ";")
        if len(fields) != 4:
            raise ValueError(f"malformed package: {line!r}")
        address_parts = tokenize(trim(fields[1]), ",")
        if len(address_parts) != 2:
            raise ValueError(f"malformed address: {fields[1]!r}")
        address = (trim(address_parts[0]), int(trim(address_parts[1])))
        location = _int_pair(fields[2], "location")
        delivered = int(trim(fields[3])) != 0
        return cls(trim(fields[0]), address, location, delivered)

    def format(self) -> str:
        """The line written to the packages file."""
        street, number = self.address
        latitude, longitude = self.location
        return f"{self.recipient};{street},{number};{latitude},{longitude};{int(self.delivered)}"

    def street_label(self) -> str:
        """The address as ``street number``, as couriers list their streets."""
        street, number = self.address
        return f"{street} {number}"