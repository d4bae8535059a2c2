"""
Scale preview controller for the recipe scaling dialog.

While the user types an overall percent, the dialog shows the goal
quantity that percent would produce. The preview is recomputed after the
input has been quiet for SCALE_PREVIEW_DEBOUNCE_MS; an invalid percent
shows 0 immediately. The preview is advisory: applying sends the raw
percent to the backend, which computes the real goal quantity.

The controller also stages one percent per part for the separate
"apply part percents" action.

Timers come from an injected scheduler with the Tk after()/after_cancel()
pair, so any widget can be passed in the UI and a fake in tests. The
controller owns at most one pending timer at a time.
"""

from typing import Any, Callable, List, Optional, Protocol

from src.models.plan import PlanRecipe
from src.services.exceptions import ValidationError
from src.services.planning.quantity_math import (
    percent_from_quantities,
    quantity_from_percent,
    round_half_up,
)
from src.utils.constants import (
    DEFAULT_PERCENT,
    ERROR_INVALID_PERCENT,
    ERROR_PART_PERCENTS_INCOMPLETE,
    SCALE_PREVIEW_DEBOUNCE_MS,
)
from src.utils.validators import parse_number, whole_to_int


class Scheduler(Protocol):
    """Anything with Tk-style timer methods (every Tk widget qualifies)."""

    def after(self, ms: int, func: Callable[[], Any]) -> Any:
        ...

    def after_cancel(self, id: Any) -> None:
        ...


def is_valid_percent(value: Optional[float]) -> bool:
    """A percent is valid when it is a number greater than zero."""
    return value is not None and value > 0


def validate_overall_percent(raw: Any) -> float:
    """
    Parse and validate an overall percent before it is sent.

    Returns:
        The percent (int when whole)

    Raises:
        ValidationError: If the value is not a number greater than zero
    """
    percent = parse_number(raw)
    if not is_valid_percent(percent):
        raise ValidationError([ERROR_INVALID_PERCENT])
    return whole_to_int(percent)


def validate_part_percents(percents: List[Optional[float]], part_count: int) -> List[float]:
    """
    Check staged part percents before they are sent.

    Raises:
        ValidationError: If there are fewer entries than parts or any is blank
    """
    if len(percents) != part_count or any(p is None for p in percents):
        raise ValidationError([ERROR_PART_PERCENTS_INCOMPLETE])
    return [whole_to_int(p) for p in percents]


class ScalePreviewController:
    """
    Debounced goal-quantity preview plus staged part percents.

    Attributes:
        overall_percent: Last parsed overall percent (None if not a number)
        preview: Predicted goal quantity shown in the dialog
        part_percents: Staged per-part percents (None marks a blank entry)
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_preview: Optional[Callable[[int], None]] = None,
        delay_ms: int = SCALE_PREVIEW_DEBOUNCE_MS,
    ):
        """
        Initialize the controller.

        Args:
            scheduler: Object providing after()/after_cancel()
            on_preview: Called with the new preview value whenever it changes
            delay_ms: Debounce delay in milliseconds
        """
        self._scheduler = scheduler
        self._on_preview = on_preview
        self.delay_ms = delay_ms

        self._timer_id: Any = None
        self.base_output: float = 0
        self.overall_percent: Optional[float] = DEFAULT_PERCENT
        self.preview: int = 0
        self.part_percents: List[Optional[float]] = []

    @property
    def has_pending_timer(self) -> bool:
        return self._timer_id is not None

    def open(self, recipe: PlanRecipe) -> None:
        """
        Initialize from the recipe being scaled.

        The overall percent starts at the recipe's current scale, the
        preview at its current goal, and each part at its own percent.
        """
        self.cancel()
        self.base_output = recipe.output_quantity
        current_goal = recipe.goal_quantity_number
        self.overall_percent = percent_from_quantities(self.base_output, current_goal)
        self.part_percents = [part.percent for part in recipe.parts]
        self._publish(round_half_up(current_goal))

    def set_overall_percent(self, raw: Any) -> None:
        """
        Handle a change to the overall percent input.

        Any pending computation is cancelled. An invalid value sets the
        preview to 0 at once; a valid one schedules a fresh computation.
        """
        self.cancel()
        self.overall_percent = parse_number(raw)

        if not is_valid_percent(self.overall_percent):
            self._publish(0)
            return

        self._timer_id = self._scheduler.after(self.delay_ms, self._on_timer)

    def _on_timer(self) -> None:
        self._timer_id = None
        if not is_valid_percent(self.overall_percent):
            return
        self._publish(quantity_from_percent(self.base_output, self.overall_percent))

    def cancel(self) -> None:
        """Cancel the pending preview computation, if any."""
        if self._timer_id is not None:
            self._scheduler.after_cancel(self._timer_id)
            self._timer_id = None

    def close(self) -> None:
        """Dialog teardown: no callback may fire after this."""
        self.cancel()

    def set_part_percent(self, index: int, raw: Any) -> None:
        """
        Stage a percent for one part.

        A blank entry is staged as None (rejected on apply); any other
        non-numeric text falls back to 100.
        """
        while len(self.part_percents) <= index:
            self.part_percents.append(None)

        if isinstance(raw, str) and raw.strip() == "":
            self.part_percents[index] = None
            return

        value = parse_number(raw)
        self.part_percents[index] = DEFAULT_PERCENT if value is None else value

    def _publish(self, value: int) -> None:
        self.preview = value
        if self._on_preview is not None:
            self._on_preview(value)
