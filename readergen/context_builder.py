"""Build Jinja2 template context from a list of descriptors.

Every value the templates print is computed here through derivation.py,
the templates only choose between branches.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from . import derivation
from .config import GeneratorConfig
from .descriptor import Descriptor

logger = logging.getLogger(__name__)


def _doc_lines(documentation: str) -> list[str]:
    """Split documentation into comment lines, stripping any '//' already there."""
    lines = []
    for line in documentation.strip().splitlines():
        line = line.strip()
        if line.startswith("//"):
            line = line[2:].strip()
        lines.append(line)
    return lines


def build_method_context(d: Descriptor) -> dict[str, Any]:
    """Context of one interface method declaration."""
    return {
        "entity": d.entity,
        "signature": derivation.signature(d),
        "doc_lines": _doc_lines(d.documentation),
    }


def build_function_context(d: Descriptor) -> dict[str, Any]:
    """Context of one function implementation."""
    attributes = derivation.attribute_list(d)
    return {
        "entity": d.entity,
        "name": derivation.method_name(d),
        "signature": derivation.signature(d),
        "input": derivation.input_type(d),
        "output": derivation.output_type(d),
        "service": d.service,
        "service_entity_fn": derivation.service_entity_fn(d),
        "filter_by_owner": d.filter_by_owner,
        "shape": derivation.shape(d).value,
        "paginated": not d.no_pagination,
        "pagination_field": derivation.pagination_field(d),
        "input_pagination_field": derivation.input_pagination_field(d),
        "merge": derivation.merge_strategy(d),
        "attribute": attributes[0],
        "inner_attribute": attributes[1] if len(attributes) > 1 else "",
    }


def build_context(descriptors: Sequence[Descriptor], config: GeneratorConfig) -> dict[str, Any]:
    """Build the full template context.

    Methods keep the input order, duplicates included. Functions skip the
    descriptors with skip_body.
    """
    methods: list[dict[str, Any]] = []
    functions: list[dict[str, Any]] = []

    for d in descriptors:
        for problem in derivation.check_descriptor(d):
            logger.warning("descriptor %r: %s", d.entity, problem)

        methods.append(build_method_context(d))
        if d.skip_body:
            logger.debug("skipping function body for %s", d.entity)
            continue
        functions.append(build_function_context(d))

    return {
        "package_name": config.package_name,
        "interface_name": config.interface_name,
        "receiver": config.receiver,
        "generated_by": config.generated_by,
        "methods": methods,
        "functions": functions,
        "method_count": len(methods),
        "function_count": len(functions),
    }
