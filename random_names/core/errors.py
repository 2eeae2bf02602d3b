"""
Errors raised while configuring or running a name generator.
"""


class NamesError(Exception):
    """Base class for all errors raised by this package"""


class ConfigurationError(NamesError):
    """A generator configuration was rejected before any name was produced"""


class UninitializedFieldError(ConfigurationError):
    """A required field was explicitly left without a value"""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"uninitialized field: {field_name}")


class InvalidConfigError(ConfigurationError):
    """A configuration value failed validation"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"validation error: {message}")


class AdjectivesEmptyError(ConfigurationError):
    """The adjective list is empty"""

    def __init__(self):
        super().__init__("adjectives must not be empty")


class NounsEmptyError(ConfigurationError):
    """The noun list is empty"""

    def __init__(self):
        super().__init__("nouns must not be empty")


class RerollLimitError(NamesError):
    """
    No name of the requested length turned up within the allowed attempts.

    Usually means the target length cannot be reached by any combination of
    the configured words.
    """

    def __init__(self, length: int, attempts: int):
        self.length = length
        self.attempts = attempts
        super().__init__(
            f"could not generate a name of length {length} after {attempts} attempts"
        )
