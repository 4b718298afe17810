"""Single-choice selection over a fixed option set."""
from typing import Optional, Sequence, Tuple
from wallet_console.utils.errors import ValidationFailure


class SingleSelect:
    """
    Holds at most one selected option.

    Starts empty. Once something is selected the component itself offers no
    way back to empty; only ``reset`` clears it.
    """

    def __init__(self, options: Sequence[str]):
        self.options: Tuple[str, ...] = tuple(options)
        self.selected: Optional[str] = None

    def select(self, value: str):
        if value not in self.options:
            raise ValidationFailure(f"'{value}' is not one of {list(self.options)}")
        self.selected = value

    def is_empty(self) -> bool:
        return self.selected is None

    def reset(self):
        self.selected = None
