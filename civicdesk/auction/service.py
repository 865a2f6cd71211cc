"""Auction operations on top of the repository, with change notification."""

from __future__ import annotations

import datetime

from civicdesk.auction.models import Date, Item, Offer
from civicdesk.auction.repository import Repository
from civicdesk.observer import Subject


class AuctionService(Subject):
    """Lists, adds and bids on auction items, notifying observers on change."""

    def __init__(self, repository: Repository) -> None:
        super().__init__()
        self.repository = repository

    def items_by_category(self, category: str) -> list[Item]:
        return [item for item in self.repository.items if item.category == category]

    def find_item(self, item_text: str) -> Item:
        """Return the stored item described by ``name ; category ; price``."""
        wanted = Item.parse(item_text)
        for item in self.repository.items:
            if item == wanted:
                return item
        raise LookupError(f"No item matches {item_text!r}")

    def add_item(self, name: str, category: str, price: int) -> None:
        self.repository.add_item(Item(name, category, price))
        self.notify()

    def bid_item(self, item_text: str, bid_price: int, user_id: int, today=None) -> None:
        """Bid on the described item; the bid must beat its current price."""
        described = Item.parse(item_text)
        if described.price >= bid_price:
            raise ValueError("The offered sum is not greater than the current price!")
        day = today or datetime.date.today()
        offer = Offer(user_id, Date(day.day, day.month, day.year), bid_price)
        self.repository.bid_item(
            Item(described.name, described.category, described.price), bid_price, offer
        )
        self.notify()