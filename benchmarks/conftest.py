"""pytest-benchmark configuration for tifflzw benchmarks."""

import random
from pathlib import Path

import pytest

from tests.helpers import lzwencode


@pytest.fixture(scope="session")
def text_strip() -> bytes:
    """Return a strip of repetitive text - long codes, few clears."""
    return lzwencode(b"Lorem ipsum dolor sit amet, consectetur adipiscing. " * 2000)


@pytest.fixture(scope="session")
def noise_strip() -> bytes:
    """Return a strip of random bytes - short codes, many clears."""
    return lzwencode(random.Random(0).randbytes(100_000))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
