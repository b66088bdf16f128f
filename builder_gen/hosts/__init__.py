"""
Hosts.

Discover target elements and describe them for the pipeline.
"""

from __future__ import annotations

from .descriptor_host import DescriptorElement, load_descriptor_file, load_descriptors, parse_type
from .python_host import ClassElement, annotation_markers, annotation_to_shape, discover, discover_module

__all__ = [
    "ClassElement",
    "discover",
    "discover_module",
    "annotation_to_shape",
    "annotation_markers",
    "DescriptorElement",
    "load_descriptors",
    "load_descriptor_file",
    "parse_type",
]
