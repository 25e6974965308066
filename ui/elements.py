from typing import Optional

from game.card import Card


class Visibility:
    """Show/hide capability shared by every control."""

    def __init__(self, visible: bool = True):
        self.visible = visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class Button:
    """A triggerable control bound to a keyboard command."""

    def __init__(self, label: str, command: str):
        self.label = label
        self.command = command
        self.visibility = Visibility()
        self.enabled = True

    def show(self) -> None:
        self.visibility.show()

    def hide(self) -> None:
        self.visibility.hide()

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    @property
    def clickable(self) -> bool:
        return self.visibility.visible and self.enabled

    def render(self) -> Optional[str]:
        if not self.visibility.visible:
            return None
        suffix = "" if self.enabled else " (busy)"
        return f"[{self.command}] {self.label}{suffix}"


class CardFace:
    """Displays the last card drawn by one player."""

    def __init__(self, owner: str):
        self.owner = owner
        self.visibility = Visibility(visible=False)
        self.card: Optional[Card] = None

    def show_card(self, card: Card) -> None:
        self.card = card
        self.visibility.show()

    def hide(self) -> None:
        self.visibility.hide()

    def render(self) -> Optional[str]:
        if not self.visibility.visible or self.card is None:
            return None
        return f"{self.owner}: {self.card} ({self.card.image_url})"


class Heading:
    """A line of text such as the outcome of a draw."""

    def __init__(self):
        self.visibility = Visibility(visible=False)
        self.text = ""

    def show_text(self, text: str) -> None:
        self.text = text
        self.visibility.show()

    def hide(self) -> None:
        self.visibility.hide()

    def clear(self) -> None:
        self.text = ""
        self.visibility.hide()

    def render(self) -> Optional[str]:
        if not self.visibility.visible:
            return None
        return self.text
