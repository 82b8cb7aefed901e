"""PySide6 front end: host loop and renderer for the Life simulator."""
