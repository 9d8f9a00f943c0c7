"""Tree-walking evaluation of mikroC programs."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from mikroc.nodes import Node, Variable
from mikroc.tokens import TokenType

_MASK = 0xFFFFFFFF


class InterpreterError(RuntimeError):
    """Raised when a program cannot continue, such as on division by zero."""


def _wrap(value: int) -> int:
    """Wrap ``value`` into the range of a signed 32-bit integer."""
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise InterpreterError("Deleni nulou")
    quotient = abs(left) // abs(right)
    return _wrap(quotient if (left < 0) == (right < 0) else -quotient)


def _modulo(left: int, right: int) -> int:
    if right == 0:
        raise InterpreterError("Deleni nulou")
    return _wrap(left - right * _divide(left, right))


def _shift_left(left: int, right: int) -> int:
    return _wrap(left << (right & 31))


def _shift_right(left: int, right: int) -> int:
    return left >> (right & 31)


_Binary = Callable[[int, int], int]

_BINARY: dict[int, _Binary] = {
    TokenType.STAR: lambda a, b: _wrap(a * b),
    TokenType.SHIFT_LEFT: _shift_left,
    TokenType.SHIFT_RIGHT: _shift_right,
    TokenType.EQUAL: lambda a, b: int(a == b),
    TokenType.NOT_EQUAL: lambda a, b: int(a != b),
    TokenType.LESS: lambda a, b: int(a < b),
    TokenType.GREATER: lambda a, b: int(a > b),
    TokenType.LESS_EQUAL: lambda a, b: int(a <= b),
    TokenType.GREATER_EQUAL: lambda a, b: int(a >= b),
    TokenType.AMPERSAND: lambda a, b: a & b,
    TokenType.CARET: lambda a, b: a ^ b,
    TokenType.PIPE: lambda a, b: a | b,
}

_COMPOUND: dict[int, _Binary] = {
    TokenType.MUL_ASSIGN: lambda a, b: _wrap(a * b),
    TokenType.DIV_ASSIGN: _divide,
    TokenType.MOD_ASSIGN: _modulo,
    TokenType.ADD_ASSIGN: lambda a, b: _wrap(a + b),
    TokenType.SUB_ASSIGN: lambda a, b: _wrap(a - b),
    TokenType.SHL_ASSIGN: _shift_left,
    TokenType.SHR_ASSIGN: _shift_right,
    TokenType.AND_ASSIGN: lambda a, b: a & b,
    TokenType.XOR_ASSIGN: lambda a, b: a ^ b,
    TokenType.OR_ASSIGN: lambda a, b: a | b,
}

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\*|\d+)?(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|ll|[hljztL])?(?P<conv>[diouxXcs%eEfFgGaAnp])"
)


def format_printf(template: str, *args: int) -> str:
    """Format ``template`` the way C ``printf`` does for integer arguments.

    Supports the ``d i u o x X c`` conversions with flags, width and
    precision (``*`` included) and ``%%``.  Extra arguments are ignored; a
    missing one or a conversion that needs a non-integer raises
    :class:`InterpreterError`.
    """
    values: Iterator[int] = iter(args)

    def take() -> int:
        try:
            return next(values)
        except StopIteration:
            raise InterpreterError("printf: missing argument") from None

    def replace(match: re.Match[str]) -> str:
        conv = match["conv"]
        if conv == "%":
            return "%"
        flags = match["flags"]
        width = match["width"] or ""
        if width == "*":
            requested = take()
            if requested < 0:
                flags += "-"
                requested = -requested
            width = str(requested)
        precision = match["precision"]
        if precision == "*":
            requested = take()
            precision = None if requested < 0 else str(requested)
        elif precision == "":
            precision = "0"
        value = take()

        if conv in "di":
            spec, argument = "d", _wrap(value)
        elif conv == "u":
            spec, argument = "d", value & _MASK
        elif conv in "xX":
            spec, argument = conv, value & _MASK
        elif conv == "o":
            spec, argument = "o", value & _MASK
            if "#" in flags:
                flags = flags.replace("#", "")
                if argument:
                    digits = len(format(argument, "o")) + 1
                    precision = str(max(int(precision or 0), digits))
        elif conv == "c":
            spec, argument = "c", chr(value & 0xFF)
            precision = None
        else:
            raise InterpreterError(
                f"printf: conversion %{conv} needs a non-integer argument"
            )
        prefix = "%" + flags + width + ("" if precision is None else "." + precision)
        return (prefix + spec) % argument

    return _SPEC.sub(replace, template)


class Interpreter:
    """Evaluates syntax trees, reading ``scan`` input and writing ``print`` output."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending: str | None = None

    def run(self, node: Node | None) -> int:
        """Execute a whole program tree and return its value."""
        try:
            return self.evaluate(node)
        finally:
            self.stdout.flush()

    def evaluate(self, node: Node | None) -> int:
        """Evaluate one node and return its integer value; None gives 0."""
        if node is None:
            return 0
        kind = node.kind
        first, second = node.first, node.second

        binary = _BINARY.get(kind)
        if binary is not None:
            left = self.evaluate(first)
            return binary(left, self.evaluate(second))
        compound = _COMPOUND.get(kind)
        if compound is not None:
            cell = self._cell(first)
            right = self.evaluate(second)
            cell.value = compound(cell.value, right)
            return cell.value

        match kind:
            case TokenType.SEQUENCE:
                self.evaluate(first)
                self.evaluate(second)
                return 0
            case TokenType.INCREMENT:
                return self._step(node, 1)
            case TokenType.DECREMENT:
                return self._step(node, -1)
            case TokenType.MINUS:
                if second is not None:
                    left = self.evaluate(first)
                    return _wrap(left - self.evaluate(second))
                return _wrap(-self.evaluate(first))
            case TokenType.PLUS:
                if second is not None:
                    left = self.evaluate(first)
                    return _wrap(left + self.evaluate(second))
                return self.evaluate(first)
            case TokenType.TILDE:
                return ~self.evaluate(first)
            case TokenType.BANG | TokenType.NOT:
                return int(not self.evaluate(first))
            case TokenType.SLASH:
                divisor = self.evaluate(second)
                if divisor == 0:
                    raise InterpreterError("Deleni nulou")
                return _divide(self.evaluate(first), divisor)
            case TokenType.PERCENT:
                divisor = self.evaluate(second)
                if divisor == 0:
                    raise InterpreterError("Deleni nulou")
                return _modulo(self.evaluate(first), divisor)
            case TokenType.AND:
                return int(bool(self.evaluate(first)) and bool(self.evaluate(second)))
            case TokenType.OR:
                return int(bool(self.evaluate(first)) or bool(self.evaluate(second)))
            case TokenType.ASSIGN:
                cell = self._cell(first)
                cell.value = self.evaluate(second)
                return cell.value
            case TokenType.IF:
                if self.evaluate(first):
                    self.evaluate(second)
                else:
                    self.evaluate(node.third)
                return 0
            case TokenType.ELSE:
                return self.evaluate(first)
            case TokenType.FOR:
                self.evaluate(first)
                while self.evaluate(second):
                    self.evaluate(node.fourth)
                    self.evaluate(node.third)
                return 0
            case TokenType.WHILE:
                while self.evaluate(first):
                    self.evaluate(second)
                return 0
            case TokenType.DO:
                self.evaluate(first)
                while self.evaluate(second):
                    self.evaluate(first)
                return 0
            case TokenType.PRINT:
                self._print(first, second)
                return 0
            case TokenType.SCAN:
                cell = self._cell(first)
                self.stdout.flush()
                number = self._scan_int()
                if number is not None:
                    cell.value = number
                return 0
            case TokenType.NUMBER:
                return int(node.value)  # type: ignore[arg-type]
            case TokenType.STRING:
                text = node.value
                return ord(text[0]) if isinstance(text, str) and text else 0
            case TokenType.VARIABLE:
                return self._cell(node).value
        if kind < 256:
            raise InterpreterError(f"Neznamy symbol: '{chr(kind)}'")
        raise InterpreterError(f"Neznamy symbol: {int(kind)}")

    @staticmethod
    def _cell(node: Node | None) -> Variable:
        if node is None or not isinstance(node.value, Variable):
            raise InterpreterError("assignment target is not a variable")
        return node.value

    def _step(self, node: Node, delta: int) -> int:
        prefix = node.first is not None
        target = node.first if prefix else node.second
        if target is not None and target.kind == TokenType.NUMBER:
            old = int(target.value)  # type: ignore[arg-type]
            target.value = _wrap(old + delta)
            return target.value if prefix else old
        cell = self._cell(target)
        old = cell.value
        cell.value = _wrap(old + delta)
        return cell.value if prefix else old

    def _print(self, first: Node | None, second: Node | None) -> None:
        if first is None or first.kind != TokenType.STRING:
            self.stdout.write(str(self.evaluate(first)))
            return
        template = str(first.value)
        if second is not None:
            self.stdout.write(format_printf(template, self.evaluate(second)))
        else:
            self.stdout.write(format_printf(template))

    def _read_char(self) -> str | None:
        if self._pending is not None:
            char, self._pending = self._pending, None
            return char
        return self.stdin.read(1) or None

    def _scan_int(self) -> int | None:
        char = self._read_char()
        while char is not None and char.isspace():
            char = self._read_char()
        if char is None:
            return None
        sign = ""
        if char in "+-":
            sign, char = char, self._read_char()
        digits = ""
        while char is not None and char in "0123456789":
            digits += char
            char = self._read_char()
        if char is not None:
            self._pending = char
        if not digits:
            return None
        return _wrap(int(sign + digits))


def interpret(node: Node | None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run a program tree with the given input and output streams."""
    return Interpreter(stdin, stdout).run(node)