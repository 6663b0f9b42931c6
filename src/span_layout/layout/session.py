"""Interactive host loop around the reducer and the solver.

A session owns the current configuration and the result computed from
it. Persistence and other outward effects run after each update, never
in the middle of one.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from span_layout.layout.edits import Edit, apply_edit
from span_layout.layout.engine import compute_layout
from span_layout.parser.model import DEFAULT_CONFIG, Configuration, LayoutResult

logger = logging.getLogger(__name__)

Effect = Callable[[Configuration, LayoutResult], None]


class LayoutSession:
    """Holds the latest configuration and its layout result.

    The result is recomputed from scratch on every submitted edit, so the
    exposed result always belongs to the most recently submitted
    configuration. ``revision`` counts applied edits.
    """

    def __init__(
        self,
        config: Configuration = DEFAULT_CONFIG,
        effects: Iterable[Effect] = (),
    ) -> None:
        self._config = config
        self._result = compute_layout(config)
        self._effects: list[Effect] = list(effects)
        self.revision = 0

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def result(self) -> LayoutResult:
        return self._result

    def add_effect(self, effect: Effect) -> None:
        self._effects.append(effect)

    def submit(self, edit: Edit) -> LayoutResult:
        """Apply an edit, recompute the layout, then run the effects."""
        config = apply_edit(self._config, edit)
        result = compute_layout(config)
        self._config = config
        self._result = result
        self.revision += 1
        logger.debug("revision %d: %r", self.revision, edit)
        self._run_effects()
        return result

    def submit_all(self, edits: Iterable[Edit]) -> LayoutResult:
        for edit in edits:
            self.submit(edit)
        return self._result

    def _run_effects(self) -> None:
        failure: Exception | None = None
        for effect in self._effects:
            try:
                effect(self._config, self._result)
            except Exception as e:
                logger.error("Effect %r failed: %s", effect, e)
                if failure is None:
                    failure = e
        if failure is not None:
            raise failure
