"""Document cache configuration entity."""

from dataclasses import dataclass


@dataclass
class GqlConfig:
    """Document cache configuration.

    Holds the toggles read by the parse path. Changing a toggle only
    affects future cache misses; cached documents are never revisited.

    Fragment Warnings:
        When fragment_warnings=True, registering a fragment name with a
        body different from the ones seen before issues a
        FragmentConflictWarning. Detection happens either way.

    Legacy Fragment Variables:
        When allow_legacy_fragment_variables=True, fragment definitions
        may declare variables (``fragment F($a: Int) on T``).
    """

    fragment_warnings: bool = True
    allow_legacy_fragment_variables: bool = False

    # None keeps every document for the process lifetime
    max_size: int | None = None

    def __post_init__(self) -> None:
        """Validate the store size."""
        if self.max_size is not None and self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
