"""
Animal roster - the fixed unlock order and the mutable per-animal records
"""

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .pop_animation import PopAnimation
from ..errors import ConfigError


class UnlockState(enum.Enum):
    """An animal and its sound button are always unlocked together"""
    LOCKED = "locked"
    UNLOCKED = "unlocked"


@dataclass(frozen=True)
class AnimalSpec:
    """Immutable identity and placement of an animal"""
    key: str
    display_name: str
    image_path: str
    sound_path: str
    x: float
    y: float
    size: float = 0.2

    def contains(self, px: float, py: float) -> bool:
        """Hit-test against the sprite box (edges inclusive)"""
        return self.x <= px <= self.x + self.size and self.y <= py <= self.y + self.size

    @property
    def center(self) -> Tuple[float, float]:
        half = self.size / 2
        return self.x + half, self.y + half


@dataclass
class AnimalRecord:
    """Mutable game state of an animal"""
    state: UnlockState = UnlockState.LOCKED
    found: bool = False
    pop: PopAnimation = field(default_factory=PopAnimation)

    @property
    def unlocked(self) -> bool:
        return self.state is UnlockState.UNLOCKED

    @property
    def sound_unlocked(self) -> bool:
        return self.state is UnlockState.UNLOCKED


AnimalRef = Union[int, str]


class AnimalRoster:
    """
    Ordered catalog of animals.

    The order is immutable and defines progression; records live in a
    parallel list so every lookup is a list index.

    Example:
        roster = AnimalRoster(specs)
        roster.expected_key()        # "cat" - only the first starts unlocked
        roster.mark_found(0)
        roster.unlock(roster.successor_index(0))
    """

    def __init__(self, specs: Sequence[AnimalSpec], pop_duration_s: float = 0.5, pop_scale: float = 1.3):
        """
        Args:
            specs: Animals in unlock order
            pop_duration_s: Duration of each animal's pop animation
            pop_scale: Peak scale of each animal's pop animation

        Raises:
            ConfigError: If the roster is empty or keys repeat
        """
        if not specs:
            raise ConfigError("Animal roster must not be empty")

        self.order: Tuple[AnimalSpec, ...] = tuple(specs)
        self._index_by_key = {spec.key: i for i, spec in enumerate(self.order)}
        if len(self._index_by_key) != len(self.order):
            raise ConfigError("Animal keys must be unique")

        self.records: List[AnimalRecord] = [
            AnimalRecord(pop=PopAnimation(pop_duration_s, pop_scale)) for _ in self.order
        ]
        self.records[0].state = UnlockState.UNLOCKED

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self) -> Iterator[Tuple[AnimalSpec, AnimalRecord]]:
        return iter(zip(self.order, self.records))

    @property
    def keys(self) -> List[str]:
        return [spec.key for spec in self.order]

    def index_of(self, ref: AnimalRef) -> int:
        """
        Resolve a key or index to an index.

        Raises:
            KeyError: For an unknown key
            IndexError: For an out of range index
        """
        if isinstance(ref, int):
            if not 0 <= ref < len(self.order):
                raise IndexError(f"Animal index {ref} out of range")
            return ref
        return self._index_by_key[ref]

    def spec(self, ref: AnimalRef) -> AnimalSpec:
        return self.order[self.index_of(ref)]

    def record(self, ref: AnimalRef) -> AnimalRecord:
        return self.records[self.index_of(ref)]

    def expected_index(self) -> Optional[int]:
        """First animal in order that is unlocked but not found, None when none is"""
        for i, record in enumerate(self.records):
            if record.unlocked and record.sound_unlocked and not record.found:
                return i
        return None

    def expected_key(self) -> Optional[str]:
        index = self.expected_index()
        return None if index is None else self.order[index].key

    def successor_index(self, index: int) -> Optional[int]:
        next_index = index + 1
        return next_index if next_index < len(self.order) else None

    def unlock(self, index: int) -> bool:
        """
        Unlock an animal.

        Returns:
            True if the animal was locked before
        """
        record = self.records[index]
        if record.unlocked:
            return False
        record.state = UnlockState.UNLOCKED
        return True

    def mark_found(self, index: int) -> None:
        self.records[index].found = True

    @property
    def all_found(self) -> bool:
        return all(record.found for record in self.records)

    @property
    def found_count(self) -> int:
        return sum(1 for record in self.records if record.found)

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Index of the first animal whose sprite contains the point, locked or not"""
        for i, spec in enumerate(self.order):
            if spec.contains(x, y):
                return i
        return None

    def advance_animations(self, dt: float) -> None:
        for record in self.records:
            record.pop.advance(dt)

    def __str__(self) -> str:
        states = ", ".join(
            f"{spec.key}:{'F' if rec.found else 'U' if rec.unlocked else 'L'}" for spec, rec in self
        )
        return f"AnimalRoster({states})"
