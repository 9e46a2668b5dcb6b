from __future__ import annotations

from typing import Tuple

from viper.channels.channel import StateChannel

from .module import Entities, PresenterState, UseCase


class Interactor:
    """
    Keeps a growing list of numbered values; each load appends `increment` more.
    """

    def __init__(self, entities: Entities) -> None:
        self._increment = entities.increment
        self.presenter_state: StateChannel[PresenterState] = StateChannel(
            PresenterState(values=self._next_values(()))
        )

    def _next_values(self, values: Tuple[str, ...]) -> Tuple[str, ...]:
        start = len(values)
        return values + tuple(str(i) for i in range(start, start + self._increment))

    def receive_use_case(self, use_case: UseCase) -> None:
        if use_case is UseCase.LOAD_VALUES:
            values = self.presenter_state.value.values
            self.presenter_state.send(PresenterState(values=self._next_values(values)))
