from enum import Enum


class Endian(Enum):
    """Byte order used to decode fixed-width integers."""
    LITTLE = "little"
    BIG = "big"
    NATIVE = "native"

    def get_struct_prefix(self) -> str:
        """Return the :mod:`struct` format prefix for this byte order."""
        prefix_map = {
            Endian.LITTLE: "<",
            Endian.BIG: ">",
            Endian.NATIVE: "=",
        }

        return prefix_map[self]
