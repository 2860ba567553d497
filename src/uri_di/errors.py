class DigestURIError(ValueError):
    """Base class for di: URI errors."""


class MissingSourceError(DigestURIError):
    pass


class InvalidSourceError(DigestURIError, TypeError):
    pass


class UnsupportedAlgorithmError(DigestURIError):
    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Algorithm {algorithm} isn't on the menu")
        self.algorithm = algorithm
