"""Deterministic clocks for timing tests."""


class FakeClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, start: float = 0.0):
        self.t = float(start)

    def now(self) -> float:
        return self.t

    def set(self, ms: float) -> None:
        self.t = float(ms)

    def advance(self, ms: float) -> None:
        self.t += ms


class SteppingClock(FakeClock):
    """Clock that moves forward by ``step`` every time it is read."""

    def __init__(self, start: float = 0.0, step: float = 7.0):
        super().__init__(start)
        self.step = step
        self.reads = 0

    def now(self) -> float:
        value = self.t
        self.t += self.step
        self.reads += 1
        return value
