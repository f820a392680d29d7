"""Fixed-width unsigned big integers with modular and Montgomery arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "core",
    "dyn_residue",
    "encoding",
    "modarith",
    "montgomery",
    "residue",
    "shifts",
    "uint",
    "wrapping",
]