"""Resume Builder - resume storage API with ATS compatibility scoring."""

__version__ = "0.1.0"
