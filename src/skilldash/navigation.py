from __future__ import annotations

from dataclasses import dataclass, replace

from .models import NavItem


@dataclass(frozen=True)
class NavigationState:
    """The active navigation item; the page's only runtime state."""

    items: tuple[NavItem, ...]
    active: str

    @classmethod
    def initial(cls, items: tuple[NavItem, ...]) -> NavigationState:
        if not items:
            raise ValueError("Navigation needs at least one item.")
        return cls(items=items, active=items[0].name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.items)

    def is_active(self, name: str) -> bool:
        return self.active == name

    def select(self, name: str) -> NavigationState:
        if name not in self.names:
            raise ValueError(f"Unknown navigation item: {name}")
        return replace(self, active=name)
