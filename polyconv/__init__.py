"""Convolutions, modular polynomial algebra, linear recurrences, big integers and planar geometry."""

__version__ = "0.1.0"

__all__ = [
    "berlekamp_massey",
    "bigint",
    "bitwise",
    "complex_fft",
    "counting",
    "geometry",
    "halfplane",
    "lagrange",
    "min_plus",
    "multipoint",
    "ntt",
    "online",
    "polynom",
]