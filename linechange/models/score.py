"""Home/away score counters for the Line Change Timer."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class Side(Enum):
    """Score counter side."""
    HOME = "home"
    AWAY = "away"


@dataclass
class ScorePair:
    """Two independent counters with a floor of zero and no ceiling."""
    home: int = 0
    away: int = 0

    def increment(self, side: Union[Side, str]) -> int:
        """Add one to a side and return its new value."""
        attr = self._attr(side)
        setattr(self, attr, getattr(self, attr) + 1)
        return getattr(self, attr)

    def decrement(self, side: Union[Side, str]) -> int:
        """Subtract one from a side; a counter already at zero stays at zero."""
        attr = self._attr(side)
        setattr(self, attr, max(0, getattr(self, attr) - 1))
        return getattr(self, attr)

    def reset(self) -> None:
        self.home = 0
        self.away = 0

    @staticmethod
    def _attr(side: Union[Side, str]) -> str:
        if isinstance(side, Side):
            return side.value
        try:
            return Side(str(side).strip().lower()).value
        except ValueError:
            raise ValueError(f"Unknown score side: {side!r}") from None

    def to_dict(self) -> Dict[str, int]:
        return {"home": self.home, "away": self.away}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ScorePair':
        if not data:
            return cls()
        return cls(
            home=max(0, int(data.get("home", 0) or 0)),
            away=max(0, int(data.get("away", 0) or 0)),
        )
