"""Tests for module assembly, data flow and lifecycle.

Covers:
- assembly order and the initial view-state
- user interaction -> use case -> state -> view propagation
- navigation reaching the router with the view as context
- releasing the view releases the whole module (no cycle collector needed)
- router kept alive externally still loses its view
"""

from __future__ import annotations

import gc
import weakref
from typing import Any, List

import pytest

from screens.example.module import Entities, Navigation, PresenterState, UseCase, ViewState, assemble
from viper.channels.channel import EventChannel, StateChannel
from viper.modules.assembler import ModuleAssembler
from viper.presentation.presenter import Presenter
from viper.routing.router import Router


@pytest.fixture(autouse=True)
def no_cycle_collector():
    """Leaks must be impossible by reference counting alone."""
    gc.collect()
    gc.disable()
    yield
    gc.enable()


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestAssembly:

    def test_components_are_wired_together(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        view, interactor, presenter, router = components

        assert view.presenter is presenter
        assert presenter.interactor is interactor
        assert presenter.router is router
        assert router.view is view
        assert router.resolver is None

    def test_initial_view_state_reflects_interactor_state(self, example_assembler, entities) -> None:
        view = example_assembler.assemble(entities, None)

        assert view.title == "3"
        assert view.rows == ("0", "1", "2")

    def test_initial_view_state_for_other_entities(self, example_assembler) -> None:
        view = example_assembler.assemble(Entities(increment=5), None)

        assert view.title == "5"
        assert view.rows == ("0", "1", "2", "3", "4")

    def test_router_learns_view_last(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)

        assert components.router.view_changes == [True]

    def test_assemble_helper_of_screen_module(self, entities) -> None:
        view = assemble(entities, None)
        assert view.title == "3"

    def test_construction_order(self) -> None:
        order: List[str] = []

        class _Interactor:
            def __init__(self, entities: Any) -> None:
                order.append("interactor")
                self.presenter_state = StateChannel(entities)

            def receive_use_case(self, use_case: Any) -> None:
                pass

        class _Presenter(Presenter[int, str, Any, Any, Any]):
            def __init__(self, interactor: Any, router: Any) -> None:
                order.append("presenter")
                super().__init__(interactor, router)

            def map_state_to_view_state(self, presenter_state: int) -> str:
                return f"value={presenter_state}"

            def receive_user_interaction(self, user_interaction: Any) -> None:
                pass

        class _View:
            def __init__(self, view_state: str) -> None:
                order.append("view")
                self.presenter = None
                self.user_interactions: EventChannel[Any] = EventChannel()
                self.initial = view_state

            def apply_view_state(self, view_state: str) -> None:
                order.append("apply")

        class _Router(Router[Any, _View, Any]):
            def __init__(self, resolver: Any) -> None:
                order.append("router")
                super().__init__(resolver)

            def on_view_changed(self) -> None:
                order.append("view_changed")

        assembler = ModuleAssembler(view=_View, interactor=_Interactor, presenter=_Presenter, router=_Router)
        view = assembler.assemble(7, None)

        assert view.initial == "value=7"
        # "apply" is the replay of the current view-state when wiring the view
        assert order == ["router", "interactor", "presenter", "view", "apply", "view_changed"]


# ---------------------------------------------------------------------------
# Data flow
# ---------------------------------------------------------------------------


class TestDataFlow:

    def test_user_interaction_loads_values(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        view, interactor = components.view, components.interactor
        view.applied.clear()

        view.select_this()

        assert interactor.presenter_state.value == PresenterState(values=("0", "1", "2", "3", "4", "5"))
        assert view.title == "6"
        assert view.rows == ("0", "1", "2", "3", "4", "5")
        assert view.applied == [ViewState(title="6", rows=("0", "1", "2", "3", "4", "5"))]

    def test_each_interaction_applies_exactly_once_in_order(self, example_assembler, entities) -> None:
        view = example_assembler.assemble(entities, None)
        view.applied.clear()

        for _ in range(3):
            view.select_this()

        assert [s.title for s in view.applied] == ["6", "9", "12"]

    def test_use_case_sent_directly_by_presenter(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)

        components.presenter.send_use_case(UseCase.LOAD_VALUES)

        assert components.view.title == "6"

    def test_navigation_reaches_router_with_view(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        view, router = components.view, components.router
        view.applied.clear()

        view.select_that()

        assert router.presented_something is True
        assert router.presentation_context is view
        assert view.applied == []

    def test_presenter_publishes_view_state(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        seen = []
        sub = components.presenter.view_state.subscribe(seen.append)

        components.view.select_this()
        sub.cancel()

        assert [s.title for s in seen] == ["3", "6"]

    def test_navigation_channel_event_only(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        components.presenter.navigate(Navigation.PRESENT_SOMETHING)

        assert components.router.presented_something


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:

    def test_releasing_view_releases_module(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        refs = {
            "view": weakref.ref(components.view),
            "interactor": weakref.ref(components.interactor),
            "presenter": weakref.ref(components.presenter),
            "router": weakref.ref(components.router),
            "presenter_subscriptions": weakref.ref(components.presenter.subscriptions),
            "router_subscription": weakref.ref(components.router.subscription),
            "presenter_state": weakref.ref(components.interactor.presenter_state),
            "view_state": weakref.ref(components.presenter.view_state),
        }
        components.view.select_this()
        components.view.select_that()

        del components

        assert {name: ref() for name, ref in refs.items()} == {name: None for name in refs}

    def test_assembled_view_is_only_strong_reference(self, example_assembler, entities) -> None:
        view = example_assembler.assemble(entities, None)
        presenter_ref = weakref.ref(view.presenter)
        router_ref = weakref.ref(view.presenter.router)

        del view

        assert presenter_ref() is None
        assert router_ref() is None

    def test_external_router_outlives_view(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        router = components.router
        view_ref = weakref.ref(components.view)
        interactor_ref = weakref.ref(components.interactor)
        presenter_ref = weakref.ref(components.presenter)
        navigation_ref = weakref.ref(components.presenter.navigation)

        del components

        assert view_ref() is None
        assert interactor_ref() is None
        assert presenter_ref() is None
        assert navigation_ref() is None
        assert router.view is None
        assert router.view_changes == [True, False]
        # the channels its wiring was attached to are gone
        assert router.subscription is not None and not router.subscription.active

    def test_interactor_held_externally_does_not_reach_view(self, example_assembler, entities) -> None:
        components = example_assembler.components(entities, None)
        interactor = components.interactor
        view_ref = weakref.ref(components.view)

        del components

        assert view_ref() is None
        # the presenter is gone, so nothing is listening anymore
        assert interactor.presenter_state.subscriber_count == 0
        interactor.receive_use_case(UseCase.LOAD_VALUES)
        assert len(interactor.presenter_state.value.values) == 6
