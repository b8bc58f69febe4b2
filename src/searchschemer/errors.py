"""Errors raised while reading a mapping document."""


class MappingReadError(ValueError):
    """Raised when a mapping document cannot be read into field records."""


class MalformedMappingError(MappingReadError):
    """Raised when the token stream violates the expected document structure."""


class MissingPropertiesError(MalformedMappingError):
    """Raised in strict mode when a type body declares no properties block."""

    def __init__(self, type_name):
        self.type_name = type_name
        label = f"type '{type_name}'" if type_name is not None else "root type body"
        super().__init__(f"No 'properties' block found in {label}")


class MappingValueError(MappingReadError):
    """Raised when a boolean or numeric property value cannot be parsed."""

    def __init__(self, property_name: str, value: str, expected: str):
        self.property_name = property_name
        self.value = value
        super().__init__(
            f"Property '{property_name}' expects {expected}, got {value!r}"
        )
