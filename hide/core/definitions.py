# hide/core/definitions.py

"""Placeholder constants written in place of redacted values."""


class Placeholder:
    """Type-tagged markers, one per JSON value kind.

    A redacted value is always replaced by a JSON string naming the kind of
    the original value. ``null`` has no marker and is left untouched.
    """

    BOOL = "<Bool>"
    NUMBER = "<Number>"
    STRING = "<String>"
    ARRAY = "<Array>"
    OBJECT = "<Object>"


class ValueKind:
    """Names of the JSON value kinds as reported in redaction results."""

    NULL = "Null"
    BOOL = "Bool"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"
