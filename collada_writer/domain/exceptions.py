class ColladaError(Exception):
    pass


class UnsetFieldAccess(ColladaError):
    def __init__(self, field_name: str | None = None) -> None:
        self.field_name = field_name
        label = field_name or "<unnamed>"
        super().__init__(f"Field '{label}' was read before it was set")


class SchemaViolation(ColladaError):
    pass


class InvalidValue(ColladaError):
    pass
