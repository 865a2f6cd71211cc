"""Delivery operations over file-backed couriers and packages."""

from __future__ import annotations

import math
from collections.abc import Iterator
from pathlib import Path

from civicdesk.delivery.models import Courier, Package
from civicdesk.observer import Subject
from civicdesk.text import tokenize, trim


class DeliveryError(Exception):
    """Raised when a delivery request cannot be carried out."""


def _read_lines(path: Path, what: str) -> Iterator[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise DeliveryError(f"Could not open the {what} file for reading!") from error
    for line in text.splitlines():
        if line.strip():
            yield line


def _within_zone(package: Package, courier: Courier) -> bool:
    package_lat, package_lon = (math.radians(value) for value in package.location)
    courier_lat, courier_lon = (math.radians(value) for value in courier.center)
    d_lat = courier_lat - package_lat
    d_lon = courier_lon - package_lon
    a = math.sin(d_lat / 2) * math.sin(d_lon / 2) + (
        math.cos(package_lat) * math.cos(courier_lat) * math.sin(d_lon / 2) ** 2
    )
    if not 0.0 <= a <= 1.0:
        return False
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return c * courier.radius <= courier.radius


class Controller(Subject):
    """Couriers and packages; packages are saved and observers notified on change."""

    def __init__(self, couriers_file, packages_file) -> None:
        super().__init__()
        self.couriers_file = Path(couriers_file)
        self.packages_file = Path(packages_file)
        self.couriers: list[Courier] = [
            Courier.parse(line) for line in _read_lines(self.couriers_file, "couriers")
        ]
        self.packages: list[Package] = [
            Package.parse(line) for line in _read_lines(self.packages_file, "packages")
        ]

    def undelivered_packages(self, courier: Courier) -> list[Package]:
        """Undelivered packages on the courier's streets or inside their zone."""
        return [
            package
            for package in self.packages
            if not package.delivered
            and (package.street_label() in courier.streets or _within_zone(package, courier))
        ]

    def packages_on_street(self, street: str) -> list[Package]:
        return [package for package in self.packages if package.street_label() == street]

    def deliver_package(self, package: Package) -> None:
        for stored in self.packages:
            if stored == package:
                stored.delivered = True
                self._save_packages()
                self.notify()
                return
        raise DeliveryError("Did not find the selected package!")

    def add_package(self, recipient: str, address: str, location: str) -> None:
        """Add a new undelivered package from ``street, number`` and ``lat, lon`` text."""
        try:
            address_parts = tokenize(trim(address), ",")
            street = trim(address_parts[0])
            number = int(trim(address_parts[1]))
            location_parts = tokenize(trim(location), ",")
            latitude = int(trim(location_parts[0]))
            longitude = int(trim(location_parts[1]))
        except (IndexError, ValueError) as error:
            raise DeliveryError(str(error)) from error
        package = Package(recipient, (street, number), (latitude, longitude), False)
        if package in self.packages:
            raise DeliveryError("The package already exists!")
        self.packages.append(package)
        self._save_packages()
        self.notify()

    def _save_packages(self) -> None:
        try:
            with self.packages_file.open("w", encoding="utf-8") as handle:
                for package in self.packages:
                    handle.write(package.format() + "\n")
        except OSError as error:
            raise DeliveryError("Could not open the packages file for writing!") from error