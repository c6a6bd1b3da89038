import typing


class MeshLoadError(RuntimeError):
    def __init__(self, message: str, *, line_number: typing.Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"

    def at_line(self, line_number: int) -> "MeshLoadError":
        if self.line_number is None:
            self.line_number = line_number
        return self


class MeshNotFoundError(MeshLoadError):
    pass


class MalformedAttributeError(MeshLoadError):
    pass


class MalformedFaceTokenError(MeshLoadError):
    pass


class DegenerateFaceError(MeshLoadError):
    pass


class AttributeIndexError(MeshLoadError):
    """A face references a position that has not been declared."""


class EmptyMeshError(MeshLoadError):
    pass
