from scoreboard.models import cards_key


def push_card(store, username: str, card_type: str) -> int:
    """Put a drawn card on top of the player's stack; returns the new length."""
    return store.lpush(cards_key(username), card_type)


def saved_cards(store, username: str) -> list[str]:
    return store.lrange(cards_key(username), 0, -1)


def delete_cards(store, username: str) -> bool:
    return store.delete(cards_key(username))
