"""Generator settings, built once by the driver and passed explicitly."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT = Path("reader_generated.go")


@dataclass(frozen=True)
class GeneratorConfig:
    # Go package of the generated file
    package_name: str = "reader"
    interface_name: str = "Reader"
    # Receiver type of every generated function, bound as "c"
    receiver: str = "connector"
    # Shown in the "Code generated by ...; DO NOT EDIT" marker
    generated_by: str = "readergen"
    output_path: Path = DEFAULT_OUTPUT
