"""
Core package for the CSS selector builder.
Selector definition documents: schema, loading and rendering.

Consumers should import submodules directly, e.g.:
  from cssbuilder.core.definition_loader import load_definitions_file, render_document
"""

__all__: list[str] = []
