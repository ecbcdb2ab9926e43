from typing import Any, Optional


def _display(descriptor: Any) -> str:
    if descriptor.long_name:
        return f"--{descriptor.long_name}"
    return f"-{descriptor.short_name}"


class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class OptionSpecException(OptionException):
    pass


class OptionParseException(OptionException):
    pass


class DuplicateDescriptorError(OptionSpecException):
    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Option ‘{option}’ already exists")


class InvalidDescriptorError(OptionSpecException):
    def __init__(self, reason: str):
        super().__init__(f"Invalid option descriptor: {reason}")


class InvalidOptionFormatError(OptionSpecException):
    def __init__(self, format: str):
        self.format = format
        super().__init__(f"Invalid option format ‘{format}’")


class UnknownOptionError(OptionParseException):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Option ‘{token}’ does not exist")


class MissingArgumentError(OptionParseException):
    def __init__(self, descriptor: Any):
        self.descriptor = descriptor
        super().__init__(f"Option ‘{_display(descriptor)}’ is missing an argument")


class UnexpectedValueError(OptionParseException):
    def __init__(self, descriptor: Any, value: Optional[str] = None):
        self.descriptor = descriptor
        self.value = value
        super().__init__(
            f"Option ‘{_display(descriptor)}’ does not take an argument, but argument ‘{value}’ given"
        )
