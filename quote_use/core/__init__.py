"""
quote_use.core: shared spans, diagnostics, errors and configuration.

Modules:
  - span: source locations carried by tokens and errors
  - diagnostics: Diagnostic records rendered by the CLI
  - errors: user-facing syntax/configuration errors and invariant violations
  - config: ExpandConfig / PreludeConfig threaded through an expansion
"""

__all__ = [
	"span",
	"diagnostics",
	"errors",
	"config",
]
