"""Player state: the item inventory and the collected cards."""

from dataclasses import dataclass, field

from manor_logic.world import CARD_TOTAL, Card

EMPTY_INVENTORY_TEXT = "You have no keys yet!"


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    description: str
    points: int = 0


class Inventory:
    """Items held by the player, unique by case-insensitive id."""

    def __init__(self):
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def add(self, item: Item) -> bool:
        key = item.id.lower()
        if any(i.id.lower() == key for i in self._items):
            return False
        self._items.append(item)
        return True

    def remove(self, name_or_id: str) -> bool:
        item = self.find(name_or_id)
        if item is None:
            return False
        self._items.remove(item)
        return True

    def find(self, name_or_id: str) -> Item | None:
        key = name_or_id.strip().lower()
        for item in self._items:
            if item.id.lower() == key or item.name.lower() == key:
                return item
        return None

    def has(self, name_or_id: str) -> bool:
        return self.find(name_or_id) is not None

    @property
    def points(self) -> int:
        return sum(i.points for i in self._items)

    def list_all(self) -> str:
        if not self._items:
            return EMPTY_INVENTORY_TEXT
        lines = [f"- \"{i.name}\": {i.description}" for i in self._items]
        return "Inventory:\n" + "\n".join(lines)


@dataclass
class Player:
    inventory: Inventory = field(default_factory=Inventory)
    cards: set[Card] = field(default_factory=set)

    def give_item(self, item: Item) -> bool:
        return self.inventory.add(item)

    def has_item(self, name_or_id: str) -> bool:
        return self.inventory.has(name_or_id)

    def add_card(self, card: Card) -> bool:
        """Add a card; returns False when it was already held."""
        if card in self.cards:
            return False
        self.cards.add(card)
        return True

    def has_card(self, card: Card) -> bool:
        return card in self.cards

    @property
    def card_count(self) -> int:
        return len(self.cards)

    def has_all_cards(self) -> bool:
        return self.card_count >= CARD_TOTAL

    def cards_listing(self) -> str:
        if not self.cards:
            return "Cards: (none)"
        # Card declaration order, which is also the order they are earned in
        names = [c.value for c in Card if c in self.cards]
        return "Cards: " + ", ".join(names)
