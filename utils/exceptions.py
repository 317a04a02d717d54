class ExecutableNotFoundError(ImportError):
    """Raised when a required executable is not on PATH."""

    def __init__(self, executable_name: str):
        super().__init__(
            f"Executable {executable_name} not found. Please install it using your package manager."
        )
