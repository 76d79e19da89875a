#!filepath: hypertime/utils/errors.py
class InvariantError(RuntimeError):
    """
    Raised when the engine (or its caller) built an impossible state:
    malformed chunk list, mixed r0 in one evolution, uncovered hypertime,
    a past box reaching past the clock.

    Never caught inside the core. It is a defect, not bad input.
    """


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (ruleset text, config values).
    Should NOT print traceback.
    """


class RulesetParseError(UserInputError):
    def __init__(self, message: str, line_no: int | None = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
