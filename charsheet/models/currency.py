"""Coin quantities and purses.

All amounts are stored as whole copper pieces; the other denominations are
fixed multiples of copper and only matter when constructing or displaying a
value.

Standard exchange rates::

    Coin      Abbr    CP     SP    EP     GP      PP
    Copper    (cp)     1   1/10  1/50  1/100  1/1000
    Silver    (sp)    10      1   1/5   1/10   1/100
    Electrum  (ep)    50      5     1    1/2    1/20
    Gold      (gp)   100     10     2      1    1/10
    Platinum  (pp)  1000    100    20     10       1
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Any, Union
from ..errors import InsufficientFundsError


class Denomination(Enum):
    """Coin denominations with their value in copper pieces."""
    COPPER = ("cp", 1)
    SILVER = ("sp", 10)
    ELECTRUM = ("ep", 50)
    GOLD = ("gp", 100)
    PLATINUM = ("pp", 1000)

    def __init__(self, abbreviation: str, scale: int):
        self.abbreviation = abbreviation
        self.scale = scale


Amount = Union[int, float, Decimal, str]


@dataclass(frozen=True, order=True)
class Coin:
    """A value measured in copper pieces."""

    copper: int = 0

    @classmethod
    def new(cls, amount: Amount, denomination: Denomination = Denomination.COPPER) -> 'Coin':
        """Create a coin value from an amount in any denomination.

        Raises:
            ValueError: If the amount is not a whole number of copper pieces
        """
        value = Decimal(str(amount)) * denomination.scale
        if value != value.to_integral_value():
            raise ValueError(
                f"{amount} {denomination.abbreviation} is not a whole number of copper pieces"
            )
        return cls(int(value))

    def __add__(self, other: 'Coin') -> 'Coin':
        if not isinstance(other, Coin):
            return NotImplemented
        return Coin(self.copper + other.copper)

    def __sub__(self, other: 'Coin') -> 'Coin':
        if not isinstance(other, Coin):
            return NotImplemented
        return Coin(self.copper - other.copper)

    def __mul__(self, factor: int) -> 'Coin':
        if not isinstance(factor, int):
            return NotImplemented
        return Coin(self.copper * factor)

    __rmul__ = __mul__

    def in_denomination(self, denomination: Denomination) -> float:
        """Value expressed in another denomination."""
        return self.copper / denomination.scale

    def format(self, denomination: Denomination = Denomination.GOLD) -> str:
        """Human readable value, e.g. ``'12.5 gp'``."""
        value = Decimal(self.copper) / denomination.scale
        text = format(value.normalize(), 'f')
        return f"{text} {denomination.abbreviation}"

    def __str__(self) -> str:
        return self.format(Denomination.COPPER)

    def to_dict(self) -> int:
        """Serialize as a copper amount."""
        return self.copper

    @classmethod
    def from_dict(cls, data: Any) -> 'Coin':
        """Create from a copper amount."""
        if isinstance(data, bool) or not isinstance(data, int):
            raise TypeError(f"Coin value must be an integer copper amount, got {data!r}")
        return cls(data)


def copper(amount: Amount) -> Coin:
    """Coin value in copper pieces."""
    return Coin.new(amount, Denomination.COPPER)


def silver(amount: Amount) -> Coin:
    """Coin value in silver pieces."""
    return Coin.new(amount, Denomination.SILVER)


def electrum(amount: Amount) -> Coin:
    """Coin value in electrum pieces."""
    return Coin.new(amount, Denomination.ELECTRUM)


def gold(amount: Amount) -> Coin:
    """Coin value in gold pieces."""
    return Coin.new(amount, Denomination.GOLD)


def platinum(amount: Amount) -> Coin:
    """Coin value in platinum pieces."""
    return Coin.new(amount, Denomination.PLATINUM)


def _check_count(count: Any, denomination: Denomination) -> None:
    """Coin counts are whole, non-negative numbers of coins."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{denomination.name.title()} count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Negative {denomination.name.lower()} count: {count}")


@dataclass
class Wealth:
    """Coins carried by a character, counted per denomination."""

    coins: Dict[Denomination, int] = field(
        default_factory=lambda: {denomination: 0 for denomination in Denomination}
    )

    def __post_init__(self):
        """Fill in missing denominations and reject negative counts."""
        for denomination in Denomination:
            self.coins.setdefault(denomination, 0)
            _check_count(self.coins[denomination], denomination)

    @property
    def total(self) -> Coin:
        """Total value of the purse."""
        return sum(
            (Coin.new(count, denomination) for denomination, count in self.coins.items()),
            Coin()
        )

    def count(self, denomination: Denomination) -> int:
        """Number of coins held in a denomination."""
        return self.coins[denomination]

    def add(self, amount: int, denomination: Denomination) -> None:
        """Add coins of a denomination."""
        _check_count(amount, denomination)
        self.coins[denomination] += amount

    def remove(self, amount: int, denomination: Denomination) -> None:
        """Remove coins of a denomination."""
        _check_count(amount, denomination)
        if self.coins[denomination] < amount:
            raise InsufficientFundsError(
                f"Cannot remove {amount} {denomination.abbreviation}, "
                f"only {self.coins[denomination]} held"
            )
        self.coins[denomination] -= amount

    def add_copper(self, amount: int) -> None:
        """Add copper pieces."""
        self.add(amount, Denomination.COPPER)

    def remove_copper(self, amount: int) -> None:
        """Remove copper pieces."""
        self.remove(amount, Denomination.COPPER)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by abbreviation."""
        return {
            denomination.abbreviation: count
            for denomination, count in self.coins.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Wealth':
        """Create from dictionary keyed by abbreviation; every denomination is required."""
        return cls(coins={
            denomination: data[denomination.abbreviation] for denomination in Denomination
        })
