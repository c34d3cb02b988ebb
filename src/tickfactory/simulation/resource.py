"""Quantity containers - variable amounts and fixed-amount bundles."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, Protocol

from .errors import AmountOverflowError, InsufficientResourceError, SpentTokenError

if TYPE_CHECKING:
    from .clock import Clock

# Amounts are unsigned 32-bit in spirit.
AMOUNT_MAX = 2**32 - 1


def checked_amount(amount: int) -> int:
    """Validate an amount that is about to be stored."""
    if amount < 0:
        raise ValueError(f"Resource amounts cannot be negative: {amount}")
    if amount > AMOUNT_MAX:
        raise AmountOverflowError(f"Resource amount {amount} exceeds {AMOUNT_MAX}")
    return amount


# Only the engine holds this key. Public constructors cannot create amounts.
_MINT = object()


class ResourceKind:
    """
    A kind of resource, such as iron ore or copper.

    Kinds compare by identity: two kinds that share a name are still
    different kinds and their resources never merge.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("ResourceKind name must be non-empty")
        self.name = name

    def __repr__(self) -> str:
        return f"ResourceKind({self.name!r})"

    def __str__(self) -> str:
        return self.name


def _check_same_kind(expected: ResourceKind, actual: ResourceKind) -> None:
    if expected is not actual:
        raise TypeError(f"Cannot combine {actual.name} with {expected.name}")


class Token:
    """Something that can be spent exactly once."""

    _spent: bool

    @property
    def is_spent(self) -> bool:
        return self._spent

    def _spend(self) -> None:
        if self._spent:
            raise SpentTokenError(f"{self!r} has already been spent")
        object.__setattr__(self, "_spent", True)


@dataclass(frozen=True, eq=False)
class Bundle(Token):
    """
    A fixed amount of one resource kind.

    Holding a bundle is proof that its amount exists, so anything that takes
    a bundle (building costs, research, recipe inputs) never has to check
    sufficiency again. Bundles cannot be constructed directly: they come from
    `Resource.bundle`, mining, hand crafting or the starting resources.
    Every consuming operation spends the bundle.
    """

    kind: ResourceKind
    amount: int
    _key: InitVar[object] = None
    _spent: bool = field(default=False, init=False, repr=False)

    def __post_init__(self, _key: object) -> None:
        if _key is not _MINT:
            raise TypeError("Bundles cannot be created directly; extract one with Resource.bundle()")
        checked_amount(self.amount)

    def split(self, first: int, second: int) -> tuple[Bundle, Bundle]:
        """
        Split into two bundles of the given amounts.

        Raises:
            ValueError: If first + second does not equal this bundle's amount
        """
        if first < 0 or second < 0 or first + second != self.amount:
            raise ValueError(
                f"Cannot split a bundle of {self.amount} into {first} and {second}"
            )
        self._spend()
        return _mint_bundle(self.kind, first), _mint_bundle(self.kind, second)

    def to_resource(self) -> Resource:
        """Convert into a Resource of the same kind and amount."""
        self._spend()
        return _mint_resource(self.kind, self.amount)

    def __add__(self, other: Bundle | Resource) -> Resource:
        if isinstance(other, Resource):
            other.add(self)
            return other
        if isinstance(other, Bundle):
            _check_same_kind(self.kind, other.kind)
            resource = self.to_resource()
            resource.add(other)
            return resource
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.kind.name} x {self.amount} (bundle)"


class Resource:
    """
    Holds an arbitrary amount of one resource kind.

    Resources can be split, merged, and bundles can be extracted from them.
    Merging drains the source, so an amount only ever lives in one place.
    A new resource is always empty; amounts enter it from the engine.
    """

    def __init__(self, kind: ResourceKind):
        self.kind = kind
        self._amount = 0

    @classmethod
    def empty(cls, kind: ResourceKind) -> Resource:
        """Create an empty resource of the given kind."""
        return cls(kind)

    def _touch(self) -> None:
        """Hook run before every public access. Buffers use it to sync their owner."""

    def _deposit(self, amount: int) -> None:
        self._amount = checked_amount(self._amount + amount)

    def _withdraw(self, amount: int) -> None:
        self._amount = checked_amount(self._amount - amount)

    @property
    def amount(self) -> int:
        """The amount currently held."""
        self._touch()
        return self._amount

    def split(self, amount: int) -> tuple[Resource, Resource]:
        """
        Drain this resource into (remainder, taken).

        Raises:
            InsufficientResourceError: If amount exceeds what is held; nothing is moved
        """
        taken = self.split_off(amount)
        return self.take_all(), taken

    def split_off(self, amount: int) -> Resource:
        """
        Remove the given amount and return it as a new resource.

        Raises:
            InsufficientResourceError: If amount exceeds what is held
        """
        self._touch()
        if amount < 0:
            raise ValueError(f"Cannot split off a negative amount: {amount}")
        if amount > self._amount:
            raise InsufficientResourceError(self.kind, amount, self._amount)
        self._amount -= amount
        return _mint_resource(self.kind, amount)

    def split_off_max(self, amount: int) -> Resource:
        """Remove up to amount, as much as is available."""
        self._touch()
        return self.split_off(min(max(amount, 0), self._amount))

    def take_all(self) -> Resource:
        """Empty this resource into a new one."""
        self._touch()
        return self.split_off(self._amount)

    def bundle(self, amount: int) -> Bundle:
        """
        Extract a bundle of exactly amount.

        Raises:
            InsufficientResourceError: If amount exceeds what is held
        """
        taken = self.split_off(amount)
        return _mint_bundle(self.kind, taken._amount)

    def add(self, other: Resource | Bundle) -> None:
        """Absorb a resource (draining it) or a bundle (spending it)."""
        self._touch()
        _check_same_kind(self.kind, other.kind)
        if isinstance(other, Bundle):
            amount = other.amount
            checked_amount(self._amount + amount)
            other._spend()
        elif isinstance(other, Resource):
            other._touch()
            amount = other._amount
            checked_amount(self._amount + amount)
            other._amount = 0
        else:
            raise TypeError(f"Cannot add {type(other).__name__} to a Resource")
        self._amount += amount

    def __iadd__(self, other: Resource | Bundle) -> Resource:
        self.add(other)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self.amount == other
        if isinstance(other, Resource):
            return self.kind is other.kind and self.amount == other.amount
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: int) -> bool:
        return self.amount < other

    def __le__(self, other: int) -> bool:
        return self.amount <= other

    def __gt__(self, other: int) -> bool:
        return self.amount > other

    def __ge__(self, other: int) -> bool:
        return self.amount >= other

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name!r}, {self._amount})"

    def __str__(self) -> str:
        return f"{self.kind.name} x {self.amount}"


def _mint_bundle(kind: ResourceKind, amount: int) -> Bundle:
    return Bundle(kind, amount, _MINT)


def _mint_resource(kind: ResourceKind, amount: int) -> Resource:
    resource = Resource(kind)
    resource._amount = checked_amount(amount)
    return resource


class Syncable(Protocol):
    """An entity whose state catches up lazily with the clock."""

    def sync(self, clock: Clock) -> None: ...


class Buffer(Resource):
    """
    A resource slot owned by a machine or territory.

    The owner hands its buffers out together with the clock they were
    accessed at. Every later access to a buffer syncs the owner against that
    clock first, so a buffer can never be read or changed at a stale tick.
    """

    def __init__(self, kind: ResourceKind, owner: Syncable):
        super().__init__(kind)
        self._owner = owner
        self._clock: Clock | None = None

    def _bind(self, clock: Clock) -> None:
        self._clock = clock

    def _touch(self) -> None:
        if self._clock is not None:
            self._owner.sync(self._clock)
