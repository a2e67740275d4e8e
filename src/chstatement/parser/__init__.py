"""Fact discovery: tokenize, classify, extract targets and clauses, build descriptors."""

from __future__ import annotations

import logging

import sqlglot

from chstatement.parser._types import Lexeme
from chstatement.parser.classify import classify
from chstatement.parser.clauses import (
    extract_format,
    extract_input,
    extract_outfile,
    extract_parameters,
    extract_positions,
    extract_settings,
)
from chstatement.parser.lexer import leading_word, lex, split_lexemes, statement_depth
from chstatement.parser.tables import extract_target
from chstatement.statement import StatementDescriptor

logger = logging.getLogger("chstatement.parser")

DEFAULT_DIALECT = "clickhouse"


def _describe(sql: str, lexemes: list[Lexeme]) -> StatementDescriptor:
    head = leading_word(lexemes)
    kind = classify(lexemes, head)
    target = extract_target(lexemes, kind, head)
    depth = statement_depth(lexemes, head)

    return StatementDescriptor(
        sql=sql,
        statement_type=kind,
        cluster=target.cluster,
        database=target.database,
        table=target.table,
        input=extract_input(lexemes, depth=depth),
        format=extract_format(lexemes, depth=depth),
        outfile=extract_outfile(lexemes, depth=depth),
        parameters=extract_parameters(lexemes),
        positions=extract_positions(lexemes, kind, head),
        settings=extract_settings(sql, lexemes, kind, head),
    )


def parse_statement(sql: str, *, dialect: str = DEFAULT_DIALECT) -> StatementDescriptor:
    """Describe a single SQL statement.

    Steps:
        1. Tokenize with sqlglot (untokenizable text → UNKNOWN descriptor)
        2. Keep tokens up to the first top-level semicolon
        3. Classify from the leading keyword
        4. Extract cluster/database/table
        5. Extract clauses, parameter slots, keyword positions, settings

    ``sql`` is kept verbatim on the descriptor; all offsets refer to it.
    """
    try:
        lexemes = lex(sql, dialect=dialect)
    except sqlglot.errors.SqlglotError as e:
        logger.warning("could not tokenize statement, leaving it unclassified: %s", e)
        return StatementDescriptor(sql)

    statements = split_lexemes(lexemes)
    return _describe(sql, statements[0] if statements else [])


def parse_statements(sql: str, *, dialect: str = DEFAULT_DIALECT) -> list[StatementDescriptor]:
    """Describe every statement of a semicolon-separated script.

    Each descriptor holds its own statement text (stripped), with offsets
    relative to that text. Empty statements are skipped.
    """
    try:
        lexemes = lex(sql, dialect=dialect)
    except sqlglot.errors.SqlglotError as e:
        logger.warning("could not tokenize script, leaving it unclassified: %s", e)
        return [StatementDescriptor(sql)] if sql.strip() else []

    descriptors: list[StatementDescriptor] = []
    for group in split_lexemes(lexemes):
        text = sql[group[0].start : group[-1].end]
        descriptors.append(parse_statement(text, dialect=dialect))
    logger.debug("split script into %d statements", len(descriptors))
    return descriptors


__all__ = [
    "DEFAULT_DIALECT",
    "parse_statement",
    "parse_statements",
]
