"""Usage DTOs - inferred role of a module."""

from __future__ import annotations

from enum import Enum


class Usage(str, Enum):
    """
    Role of a module in the build.

    - LIBMODULE: compiled as a library and linked by the targets that use it
    - EXEMODULE: supplies the entry point of an executable target
    - AMBIGUOUS: could not be classified (terminal result of inference)
    """

    LIBMODULE = "libmodule"
    EXEMODULE = "exemodule"
    AMBIGUOUS = "ambiguous"

    def __str__(self) -> str:
        return f"Usage.{self.name.capitalize()}"


# Per-pass verdict cache, owned by one assembly and threaded through resolve()
UsageLedger = dict[str, Usage]
