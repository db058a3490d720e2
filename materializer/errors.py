# materializer/errors.py


class MaterializerError(Exception):
    """Base class for every error raised by the materializer core."""


class FormatError(MaterializerError, ValueError):
    def __init__(self, message: str, token: str = "", token_index: int = -1, char: str = None):
        super().__init__(message)
        self.token = token
        self.token_index = token_index
        self.char = char


class InvalidStyle(MaterializerError, ValueError):
    def __init__(self, style):
        super().__init__(f"Unknown style: {style}")
        self.style = style


class InvalidRuleset(MaterializerError, ValueError):
    def __init__(self, ruleset):
        super().__init__(f"Unknown ruleset: {ruleset}")
        self.ruleset = ruleset


class EmptyInputError(MaterializerError, ValueError):
    def __init__(self, message: str = "binary input was empty"):
        super().__init__(message)
