"""Serialization exports."""

from .schema_serializer import render_json, render_yaml

__all__ = ["render_json", "render_yaml"]
