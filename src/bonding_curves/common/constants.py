from typing import Final


# Fractional digits of every fixed-point integer in the library.
DECIMALS: Final[int] = 9
SCALE: Final[int] = 10 ** DECIMALS

U64_MAX: Final[int] = (1 << 64) - 1
U128_MAX: Final[int] = (1 << 128) - 1
U256_MAX: Final[int] = (1 << 256) - 1
