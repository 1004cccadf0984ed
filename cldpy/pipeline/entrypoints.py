"""One-call entrypoints chaining grammar, builder, assembler and validation."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from cldpy.ast import BuildOptions, Citizen, build_citizens
from cldpy.errors import CldError, ParseError, to_diagnostic
from cldpy.parser import CldGrammar, GrammarAdapter, ParserOptions
from cldpy.pipeline.results import CheckRunResult
from cldpy.validate import WorldRule, validate_world
from cldpy.world import AssemblyOptions, World, assemble_world


def load_citizens(
    text: str,
    *,
    grammar: GrammarAdapter | None = None,
    parser_options: ParserOptions | None = None,
    build_options: BuildOptions | None = None,
) -> list[Citizen]:
    resolved_grammar = _resolve_grammar(grammar, parser_options)
    return build_citizens(resolved_grammar.parse_tree(text), build_options)


def load_world(
    text: str,
    *,
    grammar: GrammarAdapter | None = None,
    parser_options: ParserOptions | None = None,
    build_options: BuildOptions | None = None,
    assembly_options: AssemblyOptions | None = None,
    rules: Sequence[WorldRule] | None = None,
    validate: bool = True,
) -> World:
    """Parse, build, assemble and (unless `validate` is False) validate `text`.

    Raises the first `CldError` any stage produces.
    """
    citizens = load_citizens(
        text, grammar=grammar, parser_options=parser_options, build_options=build_options
    )
    world = assemble_world(citizens, assembly_options)
    if validate:
        validate_world(world, rules)
    return world


def run_check(
    text: str,
    *,
    grammar: GrammarAdapter | None = None,
    parser_options: ParserOptions | None = None,
    build_options: BuildOptions | None = None,
    assembly_options: AssemblyOptions | None = None,
    rules: Sequence[WorldRule] | None = None,
    validate: bool = True,
) -> CheckRunResult:
    """Run the full pipeline and report the outcome as data instead of raising."""
    resolved_grammar = _resolve_grammar(grammar, parser_options)
    citizens: list[Citizen] = []
    try:
        citizens = build_citizens(resolved_grammar.parse_tree(text), build_options)
        world = assemble_world(citizens, assembly_options)
        if validate:
            validate_world(world, rules)
    except CldError as error:
        logger.debug("check failed with {}: {}", error.code, error.message)
        diagnostics = (
            list(error.diagnostics) if isinstance(error, ParseError) else [to_diagnostic(error)]
        )
        return CheckRunResult(
            source_text=text,
            citizens=citizens,
            world=None,
            error=error,
            diagnostics=diagnostics,
            has_errors=True,
        )

    return CheckRunResult(
        source_text=text,
        citizens=citizens,
        world=world,
        error=None,
        diagnostics=[],
        has_errors=False,
    )


def _resolve_grammar(
    grammar: GrammarAdapter | None, parser_options: ParserOptions | None
) -> GrammarAdapter:
    if grammar is not None:
        if parser_options is not None:
            raise ValueError("Pass either grammar or parser_options, not both")
        return grammar
    return CldGrammar(parser_options or ParserOptions())


__all__ = ["load_citizens", "load_world", "run_check"]
