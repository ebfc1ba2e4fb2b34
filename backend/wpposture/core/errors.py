class ScanError(Exception):
    """A scan could not produce a result for its target."""


class WordPressScanError(ScanError):
    def __init__(self, cause: str):
        super().__init__(f"WordPress security scan failed: {cause}")


class TechStackError(ScanError):
    pass
