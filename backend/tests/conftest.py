"""Shared test configuration and pytest markers."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: literal end-to-end matchmaking scenarios with pinned output"
    )
