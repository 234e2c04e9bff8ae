"""Shared fixtures. Living at the repo root also puts stark_algebra on sys.path."""

import random

import pytest

from stark_algebra.field import PrimeField, create_stark_field


@pytest.fixture
def field():
    return create_stark_field()


@pytest.fixture
def small_field():
    return PrimeField(97, name="small-test")


@pytest.fixture
def rng():
    return random.Random(1234)
