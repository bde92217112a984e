# ABOUTME: Ordered fallback strategies for markup extraction stages
# ABOUTME: Each stage tries named pure functions in turn; the first non-empty result wins

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Strategy(Generic[T]):
    """A named extraction attempt.

    ``run`` returns ``None`` when the strategy does not apply to the markup.
    """

    name: str
    run: Callable[[str], T | None]


@dataclass(frozen=True, slots=True)
class StrategyResult(Generic[T]):
    strategy: str | None
    value: T | None

    @property
    def succeeded(self) -> bool:
        return self.strategy is not None


def _is_success(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, list | tuple):
        return len(value) > 0
    return True


def first_success(strategies: Sequence[Strategy[T]], markup: str) -> StrategyResult[T]:
    """Run ``strategies`` in order against ``markup`` and keep the first success.

    Empty lists and tuples count as failures so that list-producing stages fall
    through to their next strategy.
    """
    for strategy in strategies:
        value = strategy.run(markup)
        if _is_success(value):
            return StrategyResult(strategy=strategy.name, value=value)
    return StrategyResult(strategy=None, value=None)
