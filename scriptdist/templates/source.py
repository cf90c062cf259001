"""Template sources for project scaffolding.

Templates are plain files grouped by handler key:

    <root>/<key>/pom.xml
    <root>/<key>/src/main/java/TestRunner.groovy

The relative path of each file below <root>/<key> becomes the path of the
scaffolded entry below the new project.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Protocol, runtime_checkable

from scriptdist.core.config import get_settings

logger = logging.getLogger(__name__)

PACKAGED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "script_template"


@dataclass(frozen=True)
class TemplateFile:
    """One template file; relative_path uses '/' separators."""

    relative_path: str
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")


@runtime_checkable
class TemplateSource(Protocol):
    def iter_templates(self, key: str) -> Iterator[TemplateFile]:
        """Yield every template file registered under key.

        Raises:
            FileNotFoundError: If no template set exists for key.
        """
        ...  # noqa: PLR6301


class DirectoryTemplateSource:
    """Reads template sets from subdirectories of a root directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def iter_templates(self, key: str) -> Iterator[TemplateFile]:
        base = self.root / key
        if not base.is_dir():
            raise FileNotFoundError(f"No template directory for '{key}': {base}")
        for path in sorted(base.rglob("*")):
            if path.is_file():
                yield TemplateFile(
                    relative_path=path.relative_to(base).as_posix(),
                    path=path,
                )


def default_template_source(template_dir: Optional[Path] = None) -> DirectoryTemplateSource:
    """Template source from template_dir, the settings, or the packaged set."""
    root = template_dir or get_settings().template_dir or PACKAGED_TEMPLATE_DIR
    logger.debug("Using script templates from %s", root)
    return DirectoryTemplateSource(root)
