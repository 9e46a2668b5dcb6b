from __future__ import annotations

from viper.presentation.presenter import Presenter as BasePresenter

from .module import Navigation, PresenterState, UseCase, UserInteraction, ViewState


class Presenter(BasePresenter[PresenterState, ViewState, UserInteraction, UseCase, Navigation]):

    def map_state_to_view_state(self, presenter_state: PresenterState) -> ViewState:
        return ViewState(title=str(len(presenter_state.values)), rows=presenter_state.values)

    def receive_user_interaction(self, user_interaction: UserInteraction) -> None:
        if user_interaction is UserInteraction.SELECT_THIS:
            self.send_use_case(UseCase.LOAD_VALUES)
        elif user_interaction is UserInteraction.SELECT_THAT:
            self.navigate(Navigation.PRESENT_SOMETHING)
