"""Pytest configuration and shared fixtures for the md2tex test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove every MD2TEX_* environment variable for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("MD2TEX_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown content for testing.

    Returns
    -------
    str
        Document touching every supported construct.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2

1. First
2. Second

### Code Block

```python
def hello_world():
    print("Hello, World!")
```

#### Table Example

| Name | Score |
|------|-------|
| Ann  | 10    |
| Bob  | 7     |

See [the docs](https://example.com/docs) and ![Diagram](diagram.png).

Inline math $x^2$ and display math:

$$
E = mc^2
$$
"""
