"""
Deck of cards service clients.
Contains the generic JSON REST client and the deck of cards domain client.
"""

from .api_client import APIClient
from .deck_client import DeckOfCardsClient

__all__ = ["APIClient", "DeckOfCardsClient"]
