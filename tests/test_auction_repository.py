import pytest

from civicdesk.auction.models import Date, Item, Offer, User
from civicdesk.auction.repository import Repository, RepositoryError


@pytest.fixture
def files(tmp_path):
    users = tmp_path / "users.txt"
    items = tmp_path / "items.txt"
    users.write_text("Ana ; 1 ; collector\nBob ; 2 ; admin\n", encoding="utf-8")
    items.write_text(
        "Vase ; art ; 150 ; 1, 2-3-2024, 150\nBowl ; ceramics ; 40\n", encoding="utf-8"
    )
    return users, items


def test_loads_users_and_items(files):
    repo = Repository(*files)
    assert repo.users == [User("Ana", 1, "collector"), User("Bob", 2, "admin")]
    assert repo.items == [Item("Vase", "art", 150), Item("Bowl", "ceramics", 40)]
    assert repo.items[0].offers == [Offer(1, Date(2, 3, 2024), 150)]


def test_missing_users_file(tmp_path, files):
    with pytest.raises(RepositoryError, match="users"):
        Repository(tmp_path / "absent.txt", files[1])


def test_missing_items_file(tmp_path, files):
    with pytest.raises(RepositoryError, match="items"):
        Repository(files[0], tmp_path / "absent.txt")


def test_add_item_persists(files):
    repo = Repository(*files)
    repo.add_item(Item("Lamp", "design", 70))
    reloaded = Repository(*files)
    assert Item("Lamp", "design", 70) in reloaded.items
    assert len(reloaded.items) == 3


def test_add_duplicate_item_fails(files):
    repo = Repository(*files)
    with pytest.raises(RepositoryError, match="already exists"):
        repo.add_item(Item("Bowl", "ceramics", 40))
    assert len(repo.items) == 2


def test_bid_item_updates_price_and_offers(files):
    repo = Repository(*files)
    offer = Offer(2, Date(4, 3, 2024), 60)
    repo.bid_item(Item("Bowl", "ceramics", 40), 60, offer)
    reloaded = Repository(*files)
    bowl = reloaded.items[1]
    assert bowl.price == 60
    assert bowl.offers == [offer]


def test_bid_on_missing_item_fails(files):
    repo = Repository(*files)
    with pytest.raises(RepositoryError, match="no longer exists"):
        repo.bid_item(Item("Ghost", "art", 1), 5, Offer(1, Date(1, 1, 2024), 5))