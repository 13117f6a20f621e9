"""Repeat detection for cycling commands."""

import logging
from typing import Hashable, Optional, Sequence

from .errors import NavigationError
from .model import CursorPosition
from .stages import DEFER, Stage

logger = logging.getLogger(__name__)


class RepeatTracker:
    """Remembers, per command, which stage its next press should use.

    Only one cycle is ever live: starting a cycle or observing a different
    command forgets all others. A cycle ends once its terminal stage runs,
    after which next_stage() returns None again.
    """

    def __init__(self):
        self._stages: dict[Hashable, int] = {}

    def begin_cycle(self, command: Hashable, initial_stage: int = 0) -> None:
        self._stages = {command: initial_stage}

    def next_stage(self, command: Hashable) -> Optional[int]:
        return self._stages.get(command)

    def in_cycle(self, command: Hashable) -> bool:
        return command in self._stages

    def observe(self, command: Hashable) -> None:
        """Forget every cycle that does not belong to command."""
        for key in list(self._stages):
            if key is not command:
                del self._stages[key]

    def reset(self) -> None:
        self._stages.clear()

    def invoke(self, command: Hashable, table: Sequence[Stage], host,
               origin: Optional[CursorPosition],
               initial_stage: Optional[int] = None) -> tuple[int, CursorPosition]:
        """Run the table entry for the current stage of command's cycle.

        Args:
            command: Identity of the command being repeated.
            table: Stage functions, tried in order from the current stage.
            host: NavigationHost the stage functions query.
            origin: Position the terminal stage returns to.
            initial_stage: If given, a new cycle begins at this stage.

        Returns:
            (stage, position) for the stage that produced a position.

        Raises:
            NavigationError: No cycle is in progress, or every remaining
                stage deferred.
        """
        if initial_stage is not None:
            self.begin_cycle(command, initial_stage)
        stage = self.next_stage(command)
        if stage is None:
            raise NavigationError("No navigation cycle in progress")

        for index in range(stage, len(table)):
            result = table[index].target(host, origin)
            if result is DEFER:
                logger.debug(f"{command}: stage {table[index].name} collapsed")
                continue
            if index + 1 >= len(table):
                del self._stages[command]
            else:
                self._stages[command] = index + 1
            return index, result

        self._stages.pop(command, None)
        raise NavigationError("Every navigation stage collapsed")
