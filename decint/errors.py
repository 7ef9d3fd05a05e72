class BigIntError(Exception):
    """Base class for arithmetic errors."""
    pass


class ParseError(BigIntError, ValueError):
    """Raised when text is not a decimal integer."""
    def __init__(self, text: str, column: int = 0, context: str = ""):
        self.text = text
        self.column = column
        self.context = context
        super().__init__(f"Cannot parse {text!r} as an integer at column {column}" + (f" ({context})" if context else ""))


class DivisionByZero(BigIntError, ZeroDivisionError):
    """Raised when the divisor magnitude is zero."""
    def __init__(self, context: str = ""):
        self.context = context
        super().__init__("Division by zero" + (f" ({context})" if context else ""))


class AllocationFailure(BigIntError, MemoryError):
    """Raised when a limb sequence cannot grow."""
    def __init__(self, limbs: int):
        self.limbs = limbs
        super().__init__(f"Cannot allocate {limbs} limbs")


class InvariantViolation(BigIntError, ValueError):
    """Raised when a limb outside [0, RADIX) reaches a constructor."""
    def __init__(self, value, context: str = ""):
        self.value = value
        self.context = context
        super().__init__(f"Limb value out of range: {value!r}" + (f" ({context})" if context else ""))
