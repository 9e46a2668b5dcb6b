from __future__ import annotations

import keyword
import logging
from pathlib import Path
from typing import List, Optional

from .config import PLATFORMS, GenerateConfig, PlatformTarget
from .errors import FileAlreadyExists, InvalidModuleName, UnableToCreateFile, UnknownPlatform
from .renderer import Jinja2RendererConfig, Jinja2TemplateRenderer
from .templates import FILE_ORDER, TEMPLATES

logger = logging.getLogger(__name__)


def resolve_platform(key: str) -> PlatformTarget:
    platform = PLATFORMS.get(key)
    if platform is None:
        raise UnknownPlatform(f"Unknown platform '{key}', expected one of: {', '.join(sorted(PLATFORMS))}")
    return platform


class ModuleGenerator:
    """
    Writes the five source files of a new module.

    - nothing is written when any target file already exists
    - existing files are never overwritten
    """

    def __init__(self, renderer: Optional[Jinja2TemplateRenderer] = None) -> None:
        self._renderer = renderer or Jinja2TemplateRenderer(Jinja2RendererConfig(templates=TEMPLATES))

    def generate(self, cfg: GenerateConfig) -> List[Path]:
        module_name = cfg.module_name
        if not module_name or not module_name.isidentifier() or keyword.iskeyword(module_name):
            raise InvalidModuleName(f"Invalid module name '{cfg.name}'")

        platform = resolve_platform(cfg.platform)
        destination = cfg.destination

        logger.debug("Generating module %r for platform=%s", module_name, platform.key)

        paths = [destination / f"{stem}.py" for stem in FILE_ORDER]
        existing = [p for p in paths if p.exists()]
        if existing:
            raise FileAlreadyExists(f"File already exists: {existing[0]}")

        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise UnableToCreateFile(f"Unable to create directory {destination}: {exc}") from exc

        logger.debug("Generated directory at %s", destination)

        variables = {"module_name": module_name, "platform": platform}
        for stem, path in zip(FILE_ORDER, paths):
            contents = self._renderer.render(stem, variables)
            logger.debug("Generating %s", path)
            self._write(path, contents)

        return paths

    def _write(self, path: Path, contents: str) -> None:
        try:
            with path.open("x", encoding="utf-8") as fh:
                fh.write(contents)
        except FileExistsError as exc:
            raise FileAlreadyExists(f"File already exists: {path}") from exc
        except OSError as exc:
            raise UnableToCreateFile(f"Unable to create file {path}: {exc}") from exc
