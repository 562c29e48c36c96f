"""Render templates and write generated output.

Takes the context from context_builder and produces the Go source of the
Reader interface and its implementations. Formatting (gofmt/goimports) is
left to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .descriptor import Descriptor

TEMPLATE_DIR = Path(__file__).parent / "templates"

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """A template could not be rendered for a section or a descriptor."""


def build_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Return a fresh environment loading the .go.j2 templates."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def _render(env: jinja2.Environment, template_name: str, what: str, **values: Any) -> str:
    try:
        return env.get_template(template_name).render(**values)
    except jinja2.TemplateError as exc:
        raise RenderError(f"failed to render {what}: {exc}") from exc


def render_preamble(env: jinja2.Environment, context: dict[str, Any]) -> str:
    """Package clause and generated-file marker."""
    return _render(
        env, "package.go.j2", "package preamble",
        package_name=context["package_name"],
        generated_by=context["generated_by"],
    )


def render_method(env: jinja2.Environment, method: dict[str, Any]) -> str:
    """Documentation and signature of one interface method."""
    return _render(env, "method.go.j2", f"method for {method['entity']!r}", method=method)


def render_interface(env: jinja2.Environment, context: dict[str, Any]) -> str:
    """Interface declaring the fixed accessors and every method, in input order."""
    declarations = [render_method(env, method) for method in context["methods"]]
    return _render(
        env, "reader.go.j2", f"interface {context['interface_name']}",
        interface_name=context["interface_name"],
        declarations=declarations,
    )


def render_function(env: jinja2.Environment, fn: dict[str, Any], receiver: str) -> str:
    """Implementation of one accessor."""
    return _render(
        env, "function.go.j2", f"function for {fn['entity']!r}",
        fn=fn,
        receiver=receiver,
    )


def render_source(descriptors: Sequence[Descriptor], config: GeneratorConfig) -> str:
    """Render the whole generated file: preamble, interface, then functions."""
    context = build_context(descriptors, config)
    env = build_environment()

    parts = [render_preamble(env, context), render_interface(env, context)]
    for fn in context["functions"]:
        logger.debug("rendering %s", fn["name"])
        parts.append(render_function(env, fn, context["receiver"]))

    logger.info(
        "rendered %d methods, %d functions",
        context["method_count"], context["function_count"],
    )
    return "".join(parts)


def write_source(source: str, path: Path) -> None:
    """Write the rendered source, creating the parent directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source)
