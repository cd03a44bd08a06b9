"""Shared pytest configuration for the labelpath test suite."""


def pytest_addoption(parser):
    """Register --run-cli-tests, which enables tests/integration (they spawn labelpath in a subprocess)."""
    parser.addoption(
        "--run-cli-tests",
        action="store_true",
        default=False,
        help="Run labelpath command-line integration tests in a subprocess (slow)",
    )
