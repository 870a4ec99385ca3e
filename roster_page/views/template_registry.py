"""Loading and executing the linked set of page fragments.

A fragment is one template file, registered under its file stem
(``layout.html`` -> ``layout``). Fragments reference each other by name
with ``{% include %}``; every reference is checked while the set is
loaded, so a set that loads successfully can always resolve its own
includes. After loading, the set is never modified and can be rendered
from any number of threads or tasks at once.
"""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError, meta

from roster_page.exceptions import ErrorCode, RenderException, SinkWriteException, StartupTemplateException
from roster_page.logging_config import get_logger, log_with_context
from roster_page.protocols import OutputSink

logger = get_logger(__name__)

LAYOUT = "layout"
VIEW = "view"
PARTIAL = "bio"
REQUIRED_FRAGMENTS = (LAYOUT, VIEW, PARTIAL)


class TemplateSet:
    """Immutable, pre-linked collection of compiled fragments."""

    def __init__(self, templates: Mapping[str, Template]):
        self._templates = MappingProxyType(dict(templates))

    @property
    def names(self) -> tuple[str, ...]:
        """Fragment names in load order."""
        return tuple(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def generate(self, name: str, context: Mapping[str, Any]) -> Iterator[str]:
        """Execute fragment `name` and yield output chunks as they are produced.

        Args:
            name: Top-level fragment to execute
            context: Variables bound as the template root

        Yields:
            Rendered text chunks

        Raises:
            RenderException: If `name` is not in the set, or the fragment
                references something the context does not provide
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderException(
                f"Template {name!r} is not defined",
                details={"fragment": name, "available": list(self._templates)},
            )

        try:
            yield from template.generate(**context)
        except TemplateError as e:
            raise RenderException(
                f"Failed to render template {name!r}: {e}",
                details={"fragment": name, "error_type": type(e).__name__},
            ) from e

    def render(self, name: str, context: Mapping[str, Any], sink: OutputSink) -> None:
        """Execute fragment `name`, writing each chunk to `sink` as it is produced.

        Output is not atomic: when an error is raised, whatever was produced
        before the failure is already in `sink`.

        Args:
            name: Top-level fragment to execute
            context: Variables bound as the template root
            sink: Destination for rendered text

        Raises:
            RenderException: If execution fails
            SinkWriteException: If `sink` rejects a write
        """
        written = 0
        for chunk in self.generate(name, context):
            try:
                sink.write(chunk)
            except OSError as e:
                raise SinkWriteException(
                    f"Failed to write output of template {name!r}: {e}",
                    details={"fragment": name, "chars_written": written},
                ) from e
            written += len(chunk)


def _fragment_name(path: Path) -> str:
    return path.name.split(".", 1)[0]


def _read_sources(paths: Iterable[Path]) -> dict[str, tuple[Path, str]]:
    sources: dict[str, tuple[Path, str]] = {}
    for path in paths:
        path = Path(path)
        name = _fragment_name(path)
        if name in sources:
            raise StartupTemplateException(
                f"Fragment name {name!r} is defined by both {sources[name][0]} and {path}",
                details={"fragment": name, "path": str(path)},
            )
        try:
            sources[name] = (path, path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise StartupTemplateException(
                f"Cannot read template file {path}: {e}",
                code=ErrorCode.TEMPLATE_MISSING,
                details={"fragment": name, "path": str(path)},
            ) from e
    return sources


def _check_references(environment: Environment, sources: dict[str, tuple[Path, str]]) -> None:
    for name, (path, source) in sources.items():
        try:
            ast = environment.parse(source, name=name, filename=str(path))
        except TemplateSyntaxError as e:
            raise StartupTemplateException(
                f"Syntax error in template {path} line {e.lineno}: {e.message}",
                code=ErrorCode.TEMPLATE_SYNTAX_ERROR,
                details={"fragment": name, "path": str(path), "line": e.lineno},
            ) from e

        for target in meta.find_referenced_templates(ast):
            if target is None:
                raise StartupTemplateException(
                    f"Template {path} references a fragment by a computed name",
                    code=ErrorCode.TEMPLATE_UNRESOLVED_REFERENCE,
                    details={"fragment": name, "path": str(path)},
                )
            if target not in sources:
                raise StartupTemplateException(
                    f"Template {path} references undefined fragment {target!r}",
                    code=ErrorCode.TEMPLATE_UNRESOLVED_REFERENCE,
                    details={"fragment": name, "path": str(path), "reference": target},
                )


def load_templates(paths: Iterable[Path], required_names: Iterable[str] = REQUIRED_FRAGMENTS) -> TemplateSet:
    """Read, parse and link fragment files into one TemplateSet.

    Every fragment is autoescaped and uses StrictUndefined, so values from
    the request are HTML-escaped and a reference to a missing context
    attribute fails the render instead of printing an empty string.

    Args:
        paths: Fragment files; each is registered under its file stem
        required_names: Fragment names that must be present in the set

    Returns:
        The linked TemplateSet

    Raises:
        StartupTemplateException: If a file is unreadable, fails to parse,
            references an undefined fragment, or a required fragment is missing
    """
    sources = _read_sources(paths)

    missing = [name for name in required_names if name not in sources]
    if missing:
        raise StartupTemplateException(
            f"Required template fragments missing: {', '.join(missing)}",
            code=ErrorCode.TEMPLATE_MISSING,
            details={"missing": missing, "loaded": list(sources)},
        )

    environment = Environment(
        loader=DictLoader({name: source for name, (_, source) in sources.items()}),
        autoescape=True,
        undefined=StrictUndefined,
        auto_reload=False,
        cache_size=-1,
    )
    _check_references(environment, sources)

    templates = {}
    for name, (path, _) in sources.items():
        try:
            templates[name] = environment.get_template(name)
        except TemplateError as e:
            raise StartupTemplateException(
                f"Cannot compile template {path}: {e}",
                details={"fragment": name, "path": str(path)},
            ) from e

    log_with_context(
        logger,
        "info",
        "Template set loaded",
        fragments=list(templates),
        event_type="templates_loaded",
    )
    return TemplateSet(templates)
