"""Configuration for SetMap containers."""

from dataclasses import dataclass, fields


@dataclass
class SetMapConfig:
    """Behavior switches read by a ``SetMap`` at construction time."""

    # Verify that no two stored keys are set-equal after every insert
    check_invariants: bool = False

    # Emit DEBUG records for inserts, overwrites and deletions
    log_operations: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"SetMapConfig.{f.name} must be a bool, got {type(value).__name__}"
                )


# Global configuration instance
SETMAP_CONFIG = SetMapConfig()
