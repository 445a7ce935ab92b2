"""Rejections raised while validating a candidate before prediction."""


class CandidateValidationError(ValueError):
    """Base class for inputs that cannot be used for a salary prediction.

    Carries everything a caller needs to show the rejection to a user:
    the failure ``kind``, the offending wire field names, a short title and
    a message.
    """

    kind: str = ""
    title: str = ""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


class MissingFieldError(CandidateValidationError):
    kind = "MissingField"
    title = "Missing Information"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            "Please fill in all fields to get a salary prediction.", fields
        )


class InvalidAgeError(CandidateValidationError):
    kind = "InvalidAge"
    title = "Invalid Age"

    def __init__(self, age: int, minimum: int, maximum: int | None = None) -> None:
        if maximum is not None and age > maximum:
            message = f"Age must be {maximum} or below."
        else:
            message = f"Age must be {minimum} or above."
        super().__init__(message, ["age"])
        self.age = age
        self.minimum = minimum
        self.maximum = maximum


class InvalidExperienceError(CandidateValidationError):
    kind = "InvalidExperience"
    title = "Invalid Experience"

    def __init__(self, experience_years: int, age: int | None = None) -> None:
        if experience_years < 0:
            message = "Experience cannot be negative."
        else:
            message = "Experience cannot exceed age."
        super().__init__(message, ["experienceYears"])
        self.experience_years = experience_years
        self.age = age
