from .exceptions import (
    InvalidDimensionsError,
    NonConformableError,
    DecompositionError,
    ComplexSpectrumError,
    ComplexSpectrumWarning
)
