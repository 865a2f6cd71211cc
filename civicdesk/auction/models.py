"""Records of the art auction: dates, offers, items and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from civicdesk.text import tokenize, trim


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar day, ordered chronologically."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"


def _parse_date(text: str) -> Date:
    parts = tokenize(trim(text), "-")
    if len(parts) != 3:
        raise ValueError(f"malformed date: {text!r}")
    day, month, year = (int(trim(part)) for part in parts)
    return Date(day, month, year)


@dataclass(frozen=True)
class Offer:
    """A bid placed by a user on a given day."""

    user_id: int
    date: Date
    amount: int


def _parse_offer(text: str) -> Offer:
    parts = tokenize(trim(text), ",")
    if len(parts) != 3:
        raise ValueError(f"malformed offer: {text!r}")
    return Offer(int(trim(parts[0])), _parse_date(parts[1]), int(trim(parts[2])))


@dataclass
class Item:
    """An item up for auction; identity is name, category and price."""

    name: str
    category: str
    price: int
    offers: list[Offer] = field(default_factory=list, compare=False)

    @classmethod
    def parse(cls, line: str) -> Item:
        """Read ``name ; category ; price [; id, d-m-y, sum | ...]``."""
        fields = tokenize(trim(line), ";")
        if len(fields) not in (3, 4):
            raise ValueError(f"malformed item: {line!r}")
        offers = []
        if len(fields) == 4:
            offers = [_parse_offer(chunk) for chunk in tokenize(trim(fields[3]), "|")]
        return cls(trim(fields[0]), trim(fields[1]), int(trim(fields[2])), offers)

    def format(self) -> str:
        """The line written to the items file."""
        line = self.describe()
        if self.offers:
            line += " ; " + " | ".join(
                f"{offer.user_id}, {offer.date}, {offer.amount}" for offer in self.offers
            )
        return line

    def describe(self) -> str:
        return f"{self.name} ; {self.category} ; {self.price}"

    def offers_report(self) -> str:
        """The offers, newest first, one per line."""
        newest_first = sorted(self.offers, key=lambda offer: offer.date, reverse=True)
        return "\n".join(
            f"{offer.user_id} ; {offer.date} ; {offer.amount}" for offer in newest_first
        )

    def add_offer(self, offer: Offer) -> None:
        self.offers.append(offer)


@dataclass(frozen=True)
class User:
    """A platform user."""

    name: str
    user_id: int
    role: str

    @classmethod
    def parse(cls, line: str) -> User:
        """Read ``name ; id ; type``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 3:
            raise ValueError(f"malformed user: {line!r}")
        return cls(trim(fields[0]), int(trim(fields[1])), trim(fields[2]))