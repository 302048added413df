"""Example synthesis exports."""

from .example_cache import ExampleCache
from .example_synthesizer import ExampleDepthError, ExampleSynthesizer

__all__ = [
    "ExampleCache",
    "ExampleDepthError",
    "ExampleSynthesizer",
]
