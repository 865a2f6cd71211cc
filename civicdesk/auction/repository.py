"""File-backed storage of auction users and items."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from civicdesk.auction.models import Item, Offer, User


class RepositoryError(Exception):
    """Raised when the repository cannot carry out a request."""


def _read_lines(path: Path, what: str) -> Iterator[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise RepositoryError(f"Could not open the {what} file for reading!") from error
    for line in text.splitlines():
        if line.strip():
            yield line


class Repository:
    """Users and items loaded from text files; items are saved on change."""

    def __init__(self, users_file, items_file) -> None:
        self.users_file = Path(users_file)
        self.items_file = Path(items_file)
        self.users: list[User] = [User.parse(line) for line in _read_lines(self.users_file, "users")]
        self.items: list[Item] = [Item.parse(line) for line in _read_lines(self.items_file, "items")]

    def add_item(self, item: Item) -> None:
        if item in self.items:
            raise RepositoryError("The item already exists!")
        self.items.append(item)
        self._save_items()

    def bid_item(self, item: Item, bid_price: int, offer: Offer) -> None:
        for stored in self.items:
            if stored == item:
                stored.price = bid_price
                stored.add_offer(offer)
                self._save_items()
                return
        raise RepositoryError("The selected item no longer exists!")

    def _save_items(self) -> None:
        try:
            with self.items_file.open("w", encoding="utf-8") as handle:
                for item in self.items:
                    handle.write(item.format() + "\n")
        except OSError as error:
            raise RepositoryError("Could not open the items file for writing!") from error