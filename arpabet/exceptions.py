class ArpabetError(Exception):
    pass


class EmptyFile(ArpabetError):
    def __init__(self):
        super().__init__("The file was empty.")


class InvalidFormat(ArpabetError):
    def __init__(self, line_number: int, text: str):
        super().__init__(f"Invalid format on line {line_number}: {text}")
        self.line_number = line_number
        self.text = text


class IoFailure(ArpabetError):
    """Opening or reading a dictionary failed; the original error is kept in `cause`"""

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause


class StringParseError(ArpabetError):
    def __init__(self, token: str):
        super().__init__(f"Not a phoneme: '{token}'")
        self.token = token


class ReadOnlyDictionaryError(ArpabetError):
    pass


class InvalidConfiguration(Exception):
    def __init__(self, msg):
        super().__init__(self)
        self.msg = msg

    def __str__(self):
        return self.msg
