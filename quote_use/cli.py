# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
quote-use command line driver.

Reads an invocation body from a file (or stdin), expands it and prints the
resulting token stream. Diagnostics go to stderr as
`file:line:column: severity: message`, or with --json as one JSON object on
stdout (`exit_code` plus `diagnostics`, and `output` on success).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from quote_use.core.config import DEFAULT_FEATURES, KNOWN_FEATURES, DeclarationStyle, ExpandConfig
from quote_use.core.diagnostics import Diagnostic
from quote_use.core.errors import ConfigurationError, UseSyntaxError
from quote_use.macros import QuoteFlavor, prepare, quote_use_impl


def _report(diags: List[Diagnostic], *, exit_code: int, as_json: bool, source: str) -> int:
	if as_json:
		payload = {
			"exit_code": exit_code,
			"diagnostics": [d.to_json(default_file=source) for d in diags],
		}
		print(json.dumps(payload))
	else:
		for d in diags:
			print(d.format(default_file=source), file=sys.stderr)
	return exit_code


def _config_from_args(args: argparse.Namespace, source: str) -> ExpandConfig:
	features = [name for name in args.features.split(",") if name.strip()]
	if args.namespace_idents:
		features.append("namespace_idents")
	seed = args.namespace_seed
	if seed is None and source != "<stdin>":
		seed = Path(source).stem
	return ExpandConfig.from_features(
		features,
		default_features=not args.no_default_features,
		namespace_seed=seed,
		style=DeclarationStyle.BARE if args.bare_use else DeclarationStyle.POUND,
	)


def main(argv: list[str] | None = None) -> int:
	"""
	Expand one body. Exit codes: 0 success, 1 syntax/input errors, 2 invalid
	feature selection.
	"""
	parser = argparse.ArgumentParser(description="Resolve `use` declarations in a quote body into absolute paths")
	parser.add_argument("source", nargs="?", default="-", help="Path to the invocation body (default: stdin)")
	parser.add_argument(
		"--flavor",
		choices=[flavor.value for flavor in QuoteFlavor],
		default=QuoteFlavor.QUOTE.value,
		help="Downstream quoting macro to wrap the result in (spanned flavors expect `<span> =>` first)",
	)
	parser.add_argument("--no-prelude", action="store_true", help="Disable the implicit prelude for this body")
	parser.add_argument(
		"--features",
		default="",
		help=f"Comma-separated features to enable (known: {', '.join(KNOWN_FEATURES)})",
	)
	parser.add_argument(
		"--no-default-features",
		action="store_true",
		help=f"Do not enable the default features ({', '.join(DEFAULT_FEATURES)})",
	)
	parser.add_argument("--namespace-idents", action="store_true", help="Rewrite `$ident` into namespaced identifiers")
	parser.add_argument(
		"--namespace-seed",
		default=None,
		help="Seed for namespaced identifiers (default: the source file's stem)",
	)
	parser.add_argument("--bare-use", action="store_true", help="Declarations are written `use ...;` instead of `# use ...;`")
	parser.add_argument("--tail-only", action="store_true", help="Print only the rewritten tail, without the macro call")
	parser.add_argument("--dump-bindings", action="store_true", help="Print the effective symbol table to stderr")
	parser.add_argument("--json", action="store_true", help="Emit output and diagnostics as JSON")
	args = parser.parse_args(argv)

	source = "<stdin>" if args.source == "-" else args.source
	try:
		config = _config_from_args(args, source)
	except ConfigurationError as err:
		return _report([err.to_diagnostic()], exit_code=2, as_json=args.json, source=source)

	try:
		text = sys.stdin.read() if args.source == "-" else Path(args.source).read_text()
	except OSError as err:
		diag = Diagnostic(message=f"cannot read input: {err}", code="io", phase="driver")
		return _report([diag], exit_code=1, as_json=args.json, source=source)

	flavor = QuoteFlavor(args.flavor)
	file = None if args.source == "-" else source
	try:
		if args.dump_bindings or args.tail_only:
			_span, quote = prepare(flavor, text, config=config, file=file, no_prelude=args.no_prelude)
			if args.dump_bindings:
				for binding in quote.symbols(config).effective():
					print(str(binding), file=sys.stderr)
		if args.tail_only:
			result = quote.expand(config)
		else:
			result = quote_use_impl(flavor, text, config=config, file=file, no_prelude=args.no_prelude)
	except UseSyntaxError as err:
		return _report([err.to_diagnostic()], exit_code=1, as_json=args.json, source=source)

	rendered = str(result)
	if args.json:
		print(json.dumps({"exit_code": 0, "output": rendered, "diagnostics": []}))
	else:
		print(rendered)
	return 0


__all__ = ["main"]
