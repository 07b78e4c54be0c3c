"""
Human model
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


def _text(value: Optional[str]) -> str:
    return '' if value is None else str(value)


@dataclass(frozen=True)
class Human:
    """
    A person's display identity.

    ``formal_name`` is derived once at construction as ``"<title> <last_name>"``
    and cannot be passed in. Absent parts render as empty text, with no
    trimming, so a human with neither part has a formal name of ``" "``.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    country: Optional[str] = None
    formal_name: str = field(init=False)

    def __post_init__(self):
        # Frozen dataclass, so bypass __setattr__ for the derived field.
        object.__setattr__(self, 'formal_name', f"{_text(self.title)} {_text(self.last_name)}")

    def greet(self, other: Any = None) -> str:
        """
        Returns a greeting, addressed to ``other`` by first name when given.
        """
        if other is not None:
            return f"Hi {_text(other.first_name)}, my name is {self.formal_name}"

        return f"Hi, my name is {self.formal_name}"

    @classmethod
    def fields(cls):
        """Names of the fields accepted by the constructor."""
        return [f.name for f in fields(cls) if f.init]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Human":
        """
        Load Human from dict. Unknown keys and ``formal_name`` are ignored.
        """
        accepted = cls.fields()
        return cls(**{k: v for k, v in data.items() if k in accepted})

    def as_dict(self) -> Dict[str, Optional[str]]:
        """
        Convert this human to a dictionary, derived ``formal_name`` included.
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}
