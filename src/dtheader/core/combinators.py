"""
dtheader.core.combinators - A small parser-combinator kernel built on re.

Parsers are callables wrapped in Parser. Each run returns a Reply that
records either the new position and value, or the furthest position
reached and what was expected there. When replies are combined the one
that got further wins; ties merge their expected sets. That rule is what
makes a failure deep inside one branch outrank a shallow failure in
another.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from dtheader.core.models import ParseError


@dataclass(frozen=True)
class Reply:
    """
    Result of running a parser at a position.

    Attributes:
        status: True on success
        index: Position after the match (success only)
        value: Parsed value (success only)
        furthest: Furthest failure position seen, -1 if none
        expected: What could have matched at furthest
    """

    status: bool
    index: int
    value: Any
    furthest: int
    expected: Tuple[str, ...]


def success(index: int, value: Any) -> Reply:
    return Reply(True, index, value, -1, ())


def failure(index: int, expected: str) -> Reply:
    return Reply(False, -1, None, index, (expected,))


def merge_replies(result: Reply, last: Optional[Reply]) -> Reply:
    """Carry the furthest failure from last into result."""
    if last is None or result.furthest > last.furthest:
        return result
    if result.furthest == last.furthest:
        expected = tuple(sorted(set(result.expected) | set(last.expected)))
    else:
        expected = last.expected
    return Reply(result.status, result.index, result.value, last.furthest, expected)


class Parser:
    """Wraps a function of (text, index) -> Reply."""

    def __init__(self, run: Callable[[str, int], Reply]):
        self.run = run

    def __call__(self, text: str, index: int) -> Reply:
        return self.run(text, index)

    def map(self, fn: Callable[[Any], Any]) -> "Parser":
        def run(text: str, index: int) -> Reply:
            reply = self.run(text, index)
            if not reply.status:
                return reply
            return merge_replies(success(reply.index, fn(reply.value)), reply)

        return Parser(run)

    def chain(self, fn: Callable[[Any], "Parser"]) -> "Parser":
        """Run self, then the parser fn builds from its value."""

        def run(text: str, index: int) -> Reply:
            reply = self.run(text, index)
            if not reply.status:
                return reply
            return merge_replies(fn(reply.value).run(text, reply.index), reply)

        return Parser(run)

    def then(self, other: "Parser") -> "Parser":
        """Run self then other, keeping only other's value."""
        return seq_map(self, other, lambda _, value: value)

    def fallback(self, value: Any) -> "Parser":
        """Succeed with value without consuming input if self fails."""
        return alt(self, succeed(value))

    def parse(self, text: str) -> Union[Any, ParseError]:
        """
        Run against the whole text.

        Returns:
            The parsed value, or a ParseError positioned at the furthest
            failure
        """
        reply = seq_map(self, eof, lambda value, _: value).run(text, 0)
        if reply.status:
            return reply.value
        line, column = line_column(text, reply.furthest)
        return ParseError(
            index=reply.furthest,
            line=line,
            column=column,
            expected=reply.expected,
        )


def line_column(text: str, index: int) -> Tuple[int, int]:
    """1-based line and column of index in text."""
    before = text[:index]
    line = before.count("\n") + 1
    column = index - (before.rfind("\n") + 1) + 1
    return line, column


def succeed(value: Any) -> Parser:
    return Parser(lambda text, index: success(index, value))


def fail(expected: str) -> Parser:
    return Parser(lambda text, index: failure(index, expected))


def string(literal: str) -> Parser:
    """Match literal exactly."""
    description = f"'{literal}'"

    def run(text: str, index: int) -> Reply:
        end = index + len(literal)
        if text[index:end] == literal:
            return success(end, literal)
        return failure(index, description)

    return Parser(run)


def regex(pattern: Union[str, "re.Pattern[str]"], group: int = 0) -> Parser:
    """
    Match pattern anchored at the current position.

    Args:
        pattern: Regular expression source or compiled pattern
        group: Capture group returned as the value (0 = whole match)
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    description = f"/{compiled.pattern}/"

    def run(text: str, index: int) -> Reply:
        match = compiled.match(text, index)
        if match is None:
            return failure(index, description)
        return success(match.end(), match.group(group))

    return Parser(run)


def seq_map(*args: Any) -> Parser:
    """Run parsers in order and pass their values to the trailing function."""
    *parsers, fn = args

    def run(text: str, index: int) -> Reply:
        values: List[Any] = []
        accum: Optional[Reply] = None
        for parser in parsers:
            accum = merge_replies(parser.run(text, index), accum)
            if not accum.status:
                return accum
            values.append(accum.value)
            index = accum.index
        return merge_replies(success(index, fn(*values)), accum)

    return Parser(run)


def alt(*parsers: Parser) -> Parser:
    """First parser that succeeds; failures still report the furthest reach."""

    def run(text: str, index: int) -> Reply:
        result: Optional[Reply] = None
        for parser in parsers:
            result = merge_replies(parser.run(text, index), result)
            if result.status:
                return result
        return result

    return Parser(run)


def many(parser: Parser) -> Parser:
    """Zero or more repetitions of parser."""

    def run(text: str, index: int) -> Reply:
        values: List[Any] = []
        result: Optional[Reply] = None
        while True:
            result = merge_replies(parser.run(text, index), result)
            if not result.status:
                return merge_replies(success(index, values), result)
            if result.index == index:
                raise RuntimeError("many() applied to a parser that accepts empty input")
            values.append(result.value)
            index = result.index

    return Parser(run)


def sep_by1(parser: Parser, separator: Parser) -> Parser:
    """One or more of parser, separated by separator."""
    return seq_map(parser, many(separator.then(parser)), lambda first, rest: [first, *rest])


def _everything(text: str, index: int) -> Reply:
    return success(len(text), text[index:])


def _eof(text: str, index: int) -> Reply:
    if index < len(text):
        return failure(index, "EOF")
    return success(index, None)


everything = Parser(_everything)
eof = Parser(_eof)
