"""Exception hierarchy for concavehull."""


class ConcaveHullError(Exception):
    """Base exception for all concavehull errors."""

    pass


class InputError(ConcaveHullError, ValueError):
    """Errors caused by the caller's points or parameters."""

    pass


class InvalidPointError(InputError):
    """A point in the input cloud is malformed."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid point at index {index}: {reason}")


class InvalidConcavityError(InputError):
    """Concavity is negative or not a number."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Concavity must be a number >= 0, got {value!r}")


class HullInvariantError(ConcaveHullError):
    """An internal invariant was broken.

    These signal a defect in the algorithm or a violated input contract
    (for example coincident points). They are never recoverable.
    """

    pass


class NoCandidateError(HullInvariantError):
    """No point was available to split an edge."""

    def __init__(self, edge: tuple[int, int]) -> None:
        self.edge = edge
        super().__init__(f"No split candidate for edge {edge[0]} -> {edge[1]}")


class BrokenCycleError(HullInvariantError):
    """Finalized edges do not form a single closed ring."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Hull edges do not form a single cycle: {reason}")
