from __future__ import annotations

class InvalidAnswerError(Exception):
    """answer() received something that is not a bool."""

    def __init__(self) -> None:
        super().__init__("Wrong parameter is passed! Ask her again.")

class NoSuccessfulResultsError(Exception):
    """chain() settled every input and none of them succeeded."""

    settled: int

    def __init__(self, settled: int) -> None:
        self.settled = settled
        super().__init__(f"No successful results among {settled} settled tasks")

__all__ = ("InvalidAnswerError", "NoSuccessfulResultsError")
