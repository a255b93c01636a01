"""
quote_use.prelude: the built-in default bindings.

Bundle texts (`core.rs`, `std.rs`, `rust_2021.rs`) are plain `use`
declarations shipped as package data and parsed by the declaration parser.
"""

from .registry import PreludeRegistry, prelude_registry

__all__ = ["PreludeRegistry", "prelude_registry"]
