"""Cards, decks, piles and the war round played with them."""
