"""Derive names, types and strategies from a Descriptor.

Every function here is pure: it reads only the descriptor and never raises.
Malformed descriptors produce malformed Go, which the formatter or the
compiler will point out. check_descriptor() lists the problems it can see
without failing the generation.

Shape priority, when several flags are set:
  single_result  >  is_map  >  slice (default)

Merge priority:
  'Outer#Inner' path (flatten)  >  single/map (assign)  >  append
"""

from __future__ import annotations

from .descriptor import ATTRIBUTE_SEPARATOR, DEFAULT_PAGINATION_FIELD, Descriptor, Shape
from .naming import singularize

_TYPE_QUALIFIERS: dict[Shape, str] = {
    Shape.SINGLE: "*",
    Shape.MAP: "map[string]*",
    Shape.SLICE: "[]*",
}

MERGE_FLATTEN = "flatten"
MERGE_ASSIGN = "assign"
MERGE_APPEND = "append"


def method_name(d: Descriptor) -> str:
    """Return d.name, or "Get{entity}" ("GetOwn{entity}" when filtering by owner)."""
    if d.name:
        return d.name

    prefix = "Get"
    if d.filter_by_owner:
        prefix += "Own"
    return f"{prefix}{d.entity}"


def singular_entity(d: Descriptor) -> str:
    return d.singular or singularize(d.entity)


def shape(d: Descriptor) -> Shape:
    """Return the active output shape, see the module docstring for priority."""
    if d.single_result:
        return Shape.SINGLE
    if d.is_map:
        return Shape.MAP
    return Shape.SLICE


def output_type(d: Descriptor) -> str:
    """Build the output as "{qualifier}{service}.{singular}".

    d.output replaces "{service}.{singular}", the shape qualifier is
    always added.
    """
    qualifier = _TYPE_QUALIFIERS[shape(d)]
    if d.output:
        return f"{qualifier}{d.output}"
    return f"{qualifier}{d.service}.{singular_entity(d)}"


def service_entity_fn(d: Descriptor) -> str:
    """Name of the SDK call, "{prefix}{service_entity or entity}"."""
    return f"{d.prefix}{d.service_entity or d.entity}"


def input_type(d: Descriptor) -> str:
    return f"{d.service}.{service_entity_fn(d)}Input"


def signature(d: Descriptor) -> str:
    if d.signature:
        return d.signature

    return f"{method_name(d)}(ctx context.Context, input *{input_type(d)}) ({output_type(d)}, error)"


def is_attribute_list_slice(d: Descriptor) -> bool:
    """True when the attribute path asks to iterate an outer field."""
    return ATTRIBUTE_SEPARATOR in d.attribute_path


def attribute_list(d: Descriptor) -> list[str]:
    """Return the fields to read from each page output.

    [entity] by default, [outer, inner] for 'outer#inner' and
    [attribute_path] otherwise.
    """
    if not d.attribute_path:
        return [d.entity]
    if is_attribute_list_slice(d):
        return d.attribute_path.split(ATTRIBUTE_SEPARATOR)
    return [d.attribute_path]


def pagination_field(d: Descriptor) -> str:
    return d.pagination_field or DEFAULT_PAGINATION_FIELD


def input_pagination_field(d: Descriptor) -> str:
    return d.input_pagination_field or pagination_field(d)


def merge_strategy(d: Descriptor) -> str:
    """How each page is merged into the accumulator."""
    if is_attribute_list_slice(d):
        return MERGE_FLATTEN
    if shape(d) in (Shape.SINGLE, Shape.MAP):
        return MERGE_ASSIGN
    return MERGE_APPEND


def check_descriptor(d: Descriptor) -> list[str]:
    """List the inconsistencies of d. Never raises."""
    problems = []
    if not d.entity:
        problems.append("entity is empty")
    if d.single_result and d.is_map:
        problems.append("both single_result and is_map are set, single_result wins")
    if is_attribute_list_slice(d):
        parts = d.attribute_path.split(ATTRIBUTE_SEPARATOR)
        if len(parts) != 2 or not all(parts):
            problems.append(
                f"attribute_path {d.attribute_path!r} must be 'Outer{ATTRIBUTE_SEPARATOR}Inner'"
            )
    if d.name and d.filter_by_owner:
        problems.append(
            f"name {d.name!r} is set, filter_by_owner still applies but the 'Own' infix is not added"
        )
    return problems
