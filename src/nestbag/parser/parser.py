from __future__ import annotations

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError
from logzero import logger

from nestbag.objects.multiset import MultiSet
from nestbag.parser.common import CommonTransformer, common_grammar
from nestbag.parser.grammar import grammar
from nestbag.program import Program


# shared by all the calls of parse and parse_program
multiset_parser = Lark(common_grammar, start='multiset', parser='lalr')
program_parser = Lark(grammar, start='nestbag', parser='lalr')


class MultisetParsingError(Exception):
    pass


class MalformedInputError(MultisetParsingError):
    def __init__(self, text: str, line: int = None, column: int = None):
        self.text: str = text
        self.line: int = line
        self.column: int = column
        if line is None:
            super().__init__(f"Malformed input: {text!r}")
        else:
            super().__init__(
                f"Malformed input at line {line}, column {column}: {text!r}"
            )


class UndefinedNameError(MultisetParsingError):
    pass


class NestbagTransformer(CommonTransformer):
    def __init__(self, visit_tokens: bool = True) -> None:
        super().__init__(visit_tokens)
        self.program: Program = Program()

    def nestbag(self, args):
        return self.program

    def left_identity(self, args):
        return str(args[0].value)

    def assignment(self, args):
        name, multiset = args
        if name in self.program.bindings:
            logger.warning(f"Name {name} has already been bound. It will be overwritten.")
        self.program.bind(name, multiset)

    def expression_statement(self, args):
        self.program.results.append(args[0])

    def identity(self, args):
        name = str(args[0].value)
        if name not in self.program.bindings:
            raise UndefinedNameError(f"Name {name} has not been defined.")
        return self.program.bindings[name]

    def support(self, args):
        return args[1].build_boolean()

    def binary_operation(self, args):
        first, op, second = args
        if op == "+":
            return first + second
        if op == "*":
            return first * second
        if op == "-":
            return first - second
        raise MultisetParsingError(f"Unknown multiset operation {op}.")


def _malformed(text: str, e: UnexpectedInput) -> MalformedInputError:
    line = getattr(e, "line", None)
    # lark reports -1 when the input ends unexpectedly
    if line is None or line < 0:
        return MalformedInputError(text)
    return MalformedInputError(text, line, e.column)


def parse(text: str) -> MultiSet:
    """
    Parse the text form of a multiset, e.g., "{a, a, {b, c}}"

    :param text: the text
    :return: the multiset
    :raise MalformedInputError: If the text is not a single well-formed multiset.
    """
    try:
        tree = multiset_parser.parse(text)
    except UnexpectedInput as e:
        raise _malformed(text, e) from e
    multiset = CommonTransformer().transform(tree)
    logger.debug(f"Parsed multiset: {multiset}")
    return multiset


def parse_program(text: str) -> Program:
    """
    Parse and evaluate a program of multiset expressions, e.g.,
    A = {a, a, b}
    B = {b, c}
    supp(A) + B * {c}

    :param text: the program
    :return: the bindings and the values of the expressions
    """
    try:
        tree = program_parser.parse(text)
    except UnexpectedInput as e:
        raise _malformed(text, e) from e
    # NOTE: the transformer evaluates the statements in order
    try:
        program = NestbagTransformer().transform(tree)
    except VisitError as e:
        # lark wraps the errors raised by the transformer
        raise e.orig_exc from None
    logger.debug(f"Parsed program: \n{program}")
    return program
