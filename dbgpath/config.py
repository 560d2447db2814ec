"""Configuration classes for dbgpath components."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from dbgpath.utils.yaml_utils import normalize_yaml_dict_keys


@dataclass
class ExtensionConfig:
    """Parameters controlling how far and how strictly paths are extended."""

    # Branches of this many steps or fewer are treated as tips
    trim_len: int = 0

    # Maximum number of vertices in an extended path; None is unbounded
    max_len: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.trim_len, bool) or not isinstance(self.trim_len, int):
            raise ValueError(f"trim_len must be an integer, got {self.trim_len!r}")
        if self.trim_len < 0:
            raise ValueError(f"trim_len must be >= 0, got {self.trim_len}")
        if self.max_len is not None:
            if isinstance(self.max_len, bool) or not isinstance(self.max_len, int):
                raise ValueError(
                    f"max_len must be an integer or null, got {self.max_len!r}"
                )
            if self.max_len < 1:
                raise ValueError(f"max_len must be >= 1, got {self.max_len}")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[Any, Any]]) -> "ExtensionConfig":
        """Build a config from a mapping such as a parsed ``extension:`` section.

        Args:
            data: Mapping with optional ``trim_len`` and ``max_len`` keys. None
                or an empty mapping yields the defaults.

        Returns:
            A validated ExtensionConfig.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(
                f"extension section must be a mapping, got {type(data).__name__}"
            )
        normalized = normalize_yaml_dict_keys(dict(data))
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(
                f"Unknown extension option(s): {', '.join(unknown)}. "
                f"Valid options are: {', '.join(sorted(known))}"
            )
        return cls(**normalized)

    def to_dict(self) -> Dict[str, Any]:
        return {"trim_len": self.trim_len, "max_len": self.max_len}


# Global default configuration instance
DEFAULT_CONFIG = ExtensionConfig()
