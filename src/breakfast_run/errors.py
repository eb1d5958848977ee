"""Exceptions raised by the Breakfast Run engine.

Every ``AdventureError`` carries a message meant for the player. The command
dispatcher catches them and returns the message as the turn's response.
"""


class AdventureError(Exception):
    """Base exception for Breakfast Run."""


class ItemNotFoundError(AdventureError):
    """Raised when a container does not hold the named item."""

    def __init__(self, name: str, where: str = "here"):
        self.name = name
        self.where = where
        super().__init__(f"There is no {name} {where}.")


class DuplicateItemError(AdventureError):
    """Raised when a container already holds an item with the same name."""

    def __init__(self, name: str, container: str):
        self.name = name
        self.container = container
        super().__init__(f"There is already a {name} in {container}.")


class ItemNotTakeableError(AdventureError):
    """Raised when trying to pick up an item that is fixed in place."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"You can't take the {name}.")


class ItemTooHeavyError(AdventureError):
    """Raised when taking an item would exceed the player's carry limit."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"You can't carry the {name} as well. Try dropping something first."
        )


class ItemNotEdibleError(AdventureError):
    """Raised when trying to eat something that isn't food."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The {name} is not something you'd want to eat.")


class UnknownCommandError(AdventureError):
    """Raised when the verb is not in the vocabulary."""

    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"I don't know the command '{verb}'")


class WorldDataError(AdventureError):
    """Raised when the world content file is inconsistent."""
