from botcatalog.core.modeling import ValueObject
from botcatalog.core.validation import pattern_text

EmailAddress = pattern_text(r"[^@\s]+@[^@\s]+\.[^@\s]+", "Invalid email format")


class Email(ValueObject):
    value: EmailAddress

    def __str__(self) -> str:
        return self.value
