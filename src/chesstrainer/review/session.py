"""ReviewSession — one independent controller per example of a report."""

from __future__ import annotations

from collections.abc import Iterator

from chesstrainer.core.engine import PositionEngine
from chesstrainer.review.controller import ReviewController
from chesstrainer.review.models import MistakeExample, MultiGameAnalysisReport

ExampleKey = tuple[int, int]  # (theme index, example index)


class ReviewSession:
    """Owns the controllers for the examples of one report.

    Controllers are created the first time an example is shown.  They share a
    stateless engine and nothing else, so a failing example never affects the
    others.  Loading another report discards every controller.
    """

    __slots__ = ("_engine", "_strict", "_report", "_controllers")

    def __init__(
        self,
        report: MultiGameAnalysisReport | None = None,
        engine: PositionEngine | None = None,
        *,
        strict: bool = True,
    ) -> None:
        self._engine = engine or PositionEngine()
        self._strict = strict
        self._report = report
        self._controllers: dict[ExampleKey, ReviewController] = {}

    @property
    def report(self) -> MultiGameAnalysisReport | None:
        return self._report

    @property
    def strict(self) -> bool:
        return self._strict

    def set_strict(self, strict: bool) -> None:
        """Change example validation; existing review states are dropped."""
        if strict != self._strict:
            self._strict = strict
            self._controllers.clear()

    def load(self, report: MultiGameAnalysisReport) -> None:
        """Replace the report; previous review states are dropped."""
        self._report = report
        self._controllers.clear()

    def example(self, theme_index: int, example_index: int) -> MistakeExample:
        if self._report is None:
            raise LookupError("No report loaded")
        theme = self._report.recurring_themes[theme_index]
        return theme.examples[example_index]

    def controller(self, theme_index: int, example_index: int) -> ReviewController:
        """Return (creating on first use) the controller of an example.

        Raises:
            LookupError: no report, or indices out of range.
        """
        key = (theme_index, example_index)
        ctrl = self._controllers.get(key)
        if ctrl is None:
            ctrl = ReviewController(
                self.example(theme_index, example_index),
                self._engine,
                strict=self._strict,
            )
            self._controllers[key] = ctrl
        return ctrl

    def keys(self) -> Iterator[ExampleKey]:
        if self._report is None:
            return
        for ti, theme in enumerate(self._report.recurring_themes):
            for ei in range(len(theme.examples)):
                yield ti, ei

    def failed_examples(self) -> list[ExampleKey]:
        """Keys of examples whose data is unusable."""
        return [key for key in self.keys() if self.controller(*key).is_error]
