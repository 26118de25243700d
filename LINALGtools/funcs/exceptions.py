"""
LINALGtools: Exceptions

Error types shared by the complex matrix kernel and the eigenvalue driver.

"""


class InvalidDimensionsError(ValueError):
    """
    Raised before any numerical work when the input is malformed, e.g. a
    non-square matrix or a requested number of eigenvalues outside [1, n].
    """


class NonConformableError(ValueError):
    """
    Shape mismatch between the operands of a product.

    Attributes:
        operation (str): name of the product that failed
    """

    def __init__(
        self,
        operation: str,
        message: str = "Unconformity in product") -> None:
        self.operation = operation
        super().__init__(f"{message} ({operation})")


class DecompositionError(RuntimeError):
    """
    The eigenvalue routine returned a non-zero status.

    Attributes:
        info (int): raw status code reported by the routine
    """

    def __init__(
        self,
        info: int,
        routine: str = "dgeev") -> None:
        self.info = int(info)
        self.routine = routine
        super().__init__(f"{routine} failed, code={self.info}")


class ComplexSpectrumError(ValueError):
    """
    Raised when complex eigenvalues are found and the caller asked for
    the spectrum to be rejected instead of truncated to its real part.
    """


class ComplexSpectrumWarning(RuntimeWarning):
    """
    Emitted when imaginary parts of eigenvalues are discarded.
    """
