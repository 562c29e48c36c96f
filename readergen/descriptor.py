"""Resource descriptors: one per generated Reader accessor.

A descriptor only carries the optional fields an entry may set. Every
value the templates need is derived from it in derivation.py.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# Token field used by most SDK list calls
DEFAULT_PAGINATION_FIELD = "NextToken"

# 'Outer#Inner' means: iterate Outer, collect Inner from each element
ATTRIBUTE_SEPARATOR = "#"


class Shape(enum.Enum):
    """Output shape of a generated accessor."""

    SINGLE = "single"
    MAP = "map"
    SLICE = "slice"


@dataclass(frozen=True)
class Descriptor:
    """Generation parameters for one accessor.

    Only ``entity`` is required. Every other field either overrides a
    derivation rule or toggles a template branch.
    """

    # Plural resource name, like "Instances" or "CacheClusters"
    entity: str

    # Overrides "Get{entity}" / "GetOwn{entity}"
    name: str = ""

    # Full signature used on the interface and the implementation
    signature: str = ""

    # Output type without the shape qualifier, like "cloudfront.DistributionSummary"
    output: str = ""

    # 'Attribute' for direct access, 'Outer#Inner' to flatten
    attribute_path: str = ""

    # Name of the SDK call after the prefix, when it differs from entity
    service_entity: str = ""

    # Singular form when the inflection rules get it wrong
    singular: str = ""

    # "Describe", "List", "Get" ...
    prefix: str = ""

    # SDK package, "ec2", "s3" ...
    service: str = ""

    # Input field receiving the account ID before the call
    filter_by_owner: str = ""

    no_pagination: bool = False
    single_result: bool = False
    is_map: bool = False

    # Overrides DEFAULT_PAGINATION_FIELD on the output
    pagination_field: str = ""

    # Overrides the input field receiving the token, defaults to pagination_field
    input_pagination_field: str = ""

    documentation: str = ""

    # Only declare on the interface, the implementation is hand written
    skip_body: bool = False
