class VecMathError(Exception):
    def __init__(self, *args):
        super().__init__(*args)


class VecMathParsingError(VecMathError):
    message: str

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self.message = message


class VecMathConfigurationError(VecMathError):
    message: str

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self.message = message
