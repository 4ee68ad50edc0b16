"""Spell slot bookkeeping."""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class SpellSlot:
    """Slots of one spell level, as allotted by a class table."""

    spell_level: int
    total: int = 0
    used: int = 0

    def __post_init__(self):
        """Validate slot counts."""
        if self.total < 0:
            raise ValueError(f"Slot total cannot be negative, got {self.total}")
        if not 0 <= self.used <= self.total:
            raise ValueError(f"Used slots must be between 0 and {self.total}, got {self.used}")

    @property
    def remaining(self) -> int:
        return self.total - self.used

    def can_cast(self) -> bool:
        return self.remaining > 0

    def use(self) -> bool:
        """Expend one slot. Returns False when none are left."""
        if not self.can_cast():
            return False
        self.used += 1
        return True

    def restore(self, amount: Optional[int] = None) -> None:
        """Regain ``amount`` expended slots, or all of them after a long rest."""
        self.used = 0 if amount is None else max(0, self.used - amount)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'spell_level': self.spell_level, 'total': self.total, 'used': self.used}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpellSlot':
        """Create from dictionary."""
        return cls(**data)
