from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration shared by every builder a facade creates."""

    strict_combinators: bool = False  # reject symbols outside `combinators`
    combinators: tuple[str, ...] = DEFAULT_COMBINATORS
