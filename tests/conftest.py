"""Shared fixtures for the readergen tests."""

from __future__ import annotations

import pytest

from readergen.codegen import build_environment
from readergen.config import GeneratorConfig
from readergen.descriptor import Descriptor


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def env():
    """Environment over the shipped templates."""
    return build_environment()


@pytest.fixture
def instances() -> Descriptor:
    return Descriptor(entity="Instances", prefix="Describe", service="ec2")
