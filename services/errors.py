class ConversionError(Exception):
    pass


class NoSheetError(ConversionError):
    def __init__(self, message="No sheet found in XLSX"):
        super().__init__(message)


class EmptyHeaderError(ConversionError):
    def __init__(self, message="Empty sheet (no header row)"):
        super().__init__(message)


class MissingColumnError(ConversionError):
    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Missing required XLSX column: {column}")


class ConversionIOError(ConversionError):
    pass


class WorkbookReadError(ConversionIOError):
    pass


class OutputWriteError(ConversionIOError):
    pass
