from pyparsing import Optional, ParseException, StringEnd, Word, nums, one_of

from decint.chain import BLOCK_DIGITS, LimbChain
from decint.errors import ParseError
from decint.number import NEGATIVE, POSITIVE, BigInt


class Parser:
    def __init__(self):
        sign = Optional(one_of("+ -"))("sign")
        digits = Word(nums)("digits")
        self.grammar = (sign + digits + StringEnd()).leave_whitespace()
        self.grammar.set_parse_action(self.make_number)

    def make_chain(self, digits: str) -> LimbChain:
        chain = LimbChain()
        # Fixed-width groups from the least significant end, the last group may be shorter.
        for end in range(len(digits), 0, -BLOCK_DIGITS):
            chain.append(int(digits[max(end - BLOCK_DIGITS, 0):end]))
        return chain

    def make_number(self, tokens):
        sign = NEGATIVE if tokens.get('sign') == '-' else POSITIVE
        return BigInt._adopt(sign, self.make_chain(tokens.get('digits')))

    def parse_number(self, text: str) -> BigInt:
        if not isinstance(text, str):
            raise ParseError(repr(text), 0, "expected a string")
        try:
            return self.grammar.parse_string(text)[0]
        except ParseException as e:
            raise ParseError(text, e.column, e.msg) from e


DEFAULT_PARSER = Parser()


def parse_number(text: str) -> BigInt:
    """Convenience function to parse a decimal integer with the shared parser."""
    return DEFAULT_PARSER.parse_number(text)
