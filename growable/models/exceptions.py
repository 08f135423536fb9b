"""
Custom exceptions for the collection layer.
"""


class BorrowError(RuntimeError):
    """
    Raised when an access would alias an incompatible live borrow.

    This is a fail-fast error: the access is refused before any element
    is read or written.
    """

    def __init__(self, message: str = "already borrowed"):
        super().__init__(message)


class AlreadyBorrowedError(BorrowError):
    """
    Raised when exclusive access is requested while shared borrows are alive.
    """

    def __init__(self, readers: int, operation: str):
        """
        Initialize borrow error.

        Args:
            readers: Number of shared borrows alive at the time of the request.
            operation: The refused operation.
        """
        self.readers = readers
        self.operation = operation
        super().__init__(
            f"cannot {operation}: already borrowed by {readers} shared "
            f"iterator{'s' if readers != 1 else ''}"
        )


class AlreadyMutablyBorrowedError(BorrowError):
    """
    Raised when any access is requested while an exclusive borrow is alive.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"cannot {operation}: already mutably borrowed")


class ConsumedError(BorrowError):
    """
    Raised when a collection is used after into_iter() took its storage.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"cannot {operation}: collection was consumed by an owning iterator"
        )


class ExpiredViewError(BorrowError):
    """
    Raised when a mutable slot is used after its iterator released the borrow.
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"mutable view of element {position} outlived its exclusive borrow"
        )
