from decint.chain import BLOCK_DIGITS


class Formatter:
    def __init__(self, block_digits=BLOCK_DIGITS):
        self.block_digits = block_digits

    def format_limb(self, limb: int, padded: bool = True) -> str:
        return str(limb).zfill(self.block_digits) if padded else str(limb)

    def format(self, value) -> str:
        """Canonical decimal text: '-' only for nonzero negatives, no leading zeros."""
        limbs = value.limbs
        head = self.format_limb(limbs[-1], padded=False)
        tail = ''.join(self.format_limb(limb) for limb in reversed(limbs[:-1]))
        return ('-' if value.is_negative() else '') + head + tail

    def format_limbs(self, value) -> str:
        """One line per limb, least significant first."""
        return '\n'.join(f"  Limb {idx:2d}: {self.format_limb(limb)}" for idx, limb in enumerate(value.limbs))


def format_number(value) -> str:
    return Formatter().format(value)
