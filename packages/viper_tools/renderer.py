from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from jinja2 import Environment, StrictUndefined
from jinja2.exceptions import TemplateError

from .errors import GenerateError, TemplateNotFound


@dataclass
class Jinja2RendererConfig:
    templates: Mapping[str, str]


class Jinja2TemplateRenderer:
    """
    Renders module source files from in-memory Jinja2 templates.
    No IO. Missing variables fail loudly (StrictUndefined).
    """

    def __init__(self, cfg: Jinja2RendererConfig) -> None:
        self._cfg = cfg
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_key: str, variables: Mapping[str, Any]) -> str:
        tpl_src = self._cfg.templates.get(template_key)
        if not tpl_src:
            raise TemplateNotFound(f"Template '{template_key}' not found")

        try:
            template = self._env.from_string(tpl_src)
            return template.render(**dict(variables))
        except TemplateError as exc:
            raise GenerateError(f"Template '{template_key}' failed to render: {exc}") from exc
