class MetricError(ValueError):
    """Base class for errors raised while handling prefixed values."""


class ParseError(MetricError):
    def __init__(self, value: str, base_unit: str):
        self.value = value
        self.base_unit = base_unit
        super().__init__(
            f"Could not parse value '{value}'. Value may contain an invalid metric prefix. "
            f"Please verify that the correct base unit abbreviation was used (got '{base_unit}')."
        )


class InvalidPrefixError(MetricError):
    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Invalid metric prefix '{prefix}'.")
