"""relnotes - draft release notes from the commits since the last tag."""

__version__ = "0.1.0"
