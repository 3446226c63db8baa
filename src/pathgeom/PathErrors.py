class PathParseError(ValueError):
    """Raised by strict parsing when the text holds something that is not a point."""

    def __init__(self, message: str, text: str, position: int):
        super().__init__(f"{message} at offset {position}: {text[position:position + 20]!r}")
        self.text = text
        self.position = position
