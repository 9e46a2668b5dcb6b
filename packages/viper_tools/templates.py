from __future__ import annotations

from typing import Dict, Tuple

# Jinja2 sources of the five files of a generated module.
# Variables: module_name (str), platform (PlatformTarget).

MODULE = '''"""
{{ module_name }} module: shared types and assembly.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from viper.modules.assembler import ModuleAssembler

if TYPE_CHECKING:
    from .view import View

MODULE_KEY = "{{ module_name }}"


class Resolver(Protocol):
    """
    What the router needs to build other modules.
    """


@dataclass(frozen=True)
class Entities:
    pass


class UserInteraction(Enum):
    pass


class UseCase(Enum):
    pass


class Navigation(Enum):
    pass


@dataclass(frozen=True)
class PresenterState:
    pass


@dataclass(frozen=True)
class ViewState:
    pass


def assembler() -> ModuleAssembler[Entities, Resolver, PresenterState, ViewState, UserInteraction, UseCase, Navigation]:
    from .interactor import Interactor
    from .presenter import Presenter
    from .router import Router
    from .view import View

    return ModuleAssembler(view=View, interactor=Interactor, presenter=Presenter, router=Router)


def assemble(entities: Entities, resolver: Resolver) -> "View":
    return assembler().assemble(entities, resolver)  # type: ignore[return-value]
'''

VIEW = '''"""
{{ platform.display_name }} view of the {{ module_name }} module.
"""
from __future__ import annotations

from typing import Any, Optional

{% if platform.toolkit_import %}
{{ platform.toolkit_import }}

{% endif %}
from viper.channels.channel import EventChannel

from .module import UserInteraction, ViewState


class View{% if platform.view_base %}({{ platform.view_base }}){% endif %}:

    def __init__(self, view_state: ViewState{{ platform.init_params }}) -> None:
{% if platform.super_init %}
        {{ platform.super_init }}
{% endif %}
        self.presenter: Optional[Any] = None
        self.user_interactions: EventChannel[UserInteraction] = EventChannel()
        self._view_state = view_state

{% if platform.defers_render %}
        # not on screen yet, render on the next UI loop iteration
{% endif %}
        {{ platform.render_call }}

    def apply_view_state(self, view_state: ViewState) -> None:
        self._view_state = view_state
        self._render()

    def _render(self) -> None:
        pass
'''

INTERACTOR = '''"""
Business logic of the {{ module_name }} module.
"""
from __future__ import annotations

from viper.channels.channel import StateChannel

from .module import Entities, PresenterState, UseCase


class Interactor:

    def __init__(self, entities: Entities) -> None:
        self.presenter_state: StateChannel[PresenterState] = StateChannel(self._make_presenter_state())

    def _make_presenter_state(self) -> PresenterState:
        return PresenterState()

    def receive_use_case(self, use_case: UseCase) -> None:
        pass
'''

PRESENTER = '''"""
Presentation logic of the {{ module_name }} module.
"""
from __future__ import annotations

from viper.presentation.presenter import Presenter as BasePresenter

from .module import Navigation, PresenterState, UseCase, UserInteraction, ViewState


class Presenter(BasePresenter[PresenterState, ViewState, UserInteraction, UseCase, Navigation]):

    def map_state_to_view_state(self, presenter_state: PresenterState) -> ViewState:
        return ViewState()

    def receive_user_interaction(self, user_interaction: UserInteraction) -> None:
        pass
'''

ROUTER = '''"""
Navigation of the {{ module_name }} module.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from viper.routing.router import Router as BaseRouter

from .module import Navigation, Resolver

if TYPE_CHECKING:
    from .view import View


class Router(BaseRouter[Resolver, "View", Navigation]):

    def on_view_changed(self) -> None:
        pass

    def receive_navigation(self, navigation: Navigation, view: "View") -> None:
        pass
'''

# file stem -> template, in generation order
TEMPLATES: Dict[str, str] = {
    "module": MODULE,
    "view": VIEW,
    "interactor": INTERACTOR,
    "presenter": PRESENTER,
    "router": ROUTER,
}

FILE_ORDER: Tuple[str, ...] = tuple(TEMPLATES)
