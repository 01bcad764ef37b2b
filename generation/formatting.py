"""Text formatting for operands, answers and question sentences.

Decimal values are carried as tenths (integers scaled by 10) and only
turned into text here, using integer arithmetic so no rounding occurs.
"""


def format_int(value: int) -> str:
    return str(value)


def format_tenths(tenths: int) -> str:
    """Format a tenths value with exactly one decimal digit, e.g. -34 -> "-3.4"."""
    sign = "-" if tenths < 0 else ""
    whole, fraction = divmod(abs(tenths), 10)
    return f"{sign}{whole}.{fraction}"


def parenthesize_negative(text: str, value: int) -> str:
    """Wrap negative operands so the sign can't be read as the operator."""
    return f"({text})" if value < 0 else text


def format_int_operand(value: int) -> str:
    return parenthesize_negative(format_int(value), value)


def format_tenths_operand(tenths: int) -> str:
    return parenthesize_negative(format_tenths(tenths), tenths)


def compact_question(left: str, symbol: str, right: str) -> str:
    """Symbolic form, e.g. "(-3.4) + 5.1 = ?"."""
    return f"{left} {symbol} {right} = ?"


def natural_question(left: str, verb: str, right: str) -> str:
    """Sentence form, e.g. "What is 12 divided by 4?"."""
    return f"What is {left} {verb} {right}?"
