from manor_logic.player import EMPTY_INVENTORY_TEXT, Inventory, Item, Player
from manor_logic.world import Card


def test_duplicate_item_id_is_rejected_case_insensitively():
    inv = Inventory()
    assert inv.add(Item("Key", "Brass Key", "Old and bent.")) is True
    assert inv.add(Item("key", "Another Key", "Shiny.")) is False
    assert len(inv) == 1
    assert inv.find("key").name == "Brass Key"


def test_has_item_matches_id_or_name():
    player = Player()
    player.give_item(Item("book", "Dusty Book", "B then 3.", points=10))
    assert player.has_item("BOOK")
    assert player.has_item("dusty book")
    assert not player.has_item("candle")


def test_remove_and_points():
    inv = Inventory()
    inv.add(Item("a", "A", "", points=5))
    inv.add(Item("b", "B", "", points=10))
    assert inv.points == 15
    assert inv.remove("a") is True
    assert inv.remove("a") is False
    assert inv.points == 10


def test_empty_listing_has_fallback_message():
    assert Inventory().list_all() == EMPTY_INVENTORY_TEXT


def test_listing_names_items():
    inv = Inventory()
    inv.add(Item("book", "dusty book", "B then 3."))
    listing = inv.list_all()
    assert listing.startswith("Inventory:")
    assert "\"dusty book\": B then 3." in listing


def test_cards_are_a_set():
    player = Player()
    assert player.add_card(Card.RAT) is True
    assert player.add_card(Card.RAT) is False
    assert player.card_count == 1
    assert player.has_card(Card.RAT)
    assert not player.has_card(Card.SNAKE)


def test_cards_listing():
    player = Player()
    assert player.cards_listing() == "Cards: (none)"
    player.add_card(Card.SNAKE)
    player.add_card(Card.BEETLE)
    assert player.cards_listing() == "Cards: beetle, snake"


def test_has_all_cards():
    player = Player()
    for card in Card:
        assert not player.has_all_cards()
        player.add_card(card)
    assert player.has_all_cards()
