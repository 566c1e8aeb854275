"""
A module where all custom exceptions are defined.

We put exceptions into this separate module, so they can be
imported everywhere without risking circular imports
"""


class UsageError(ValueError):
    """
    Exception raised if the program was called without enough arguments.
    """
    pass


class PdbFileError(ValueError):
    """
    Base class of all errors that make a single PDB file unusable.

    When files are analysed in skip mode, errors of this class are
    logged and the next file is processed.
    """
    pass


class FileOpenError(PdbFileError):
    """
    Exception raised if a PDB file could not be opened for reading.
    """
    pass


class MalformedRecordError(PdbFileError):
    """
    Exception raised if an ATOM line is shorter than the record layout requires.
    """
    pass


class CoordinateParseError(PdbFileError):
    """
    Exception raised if a coordinate field does not contain a finite number.
    """
    pass


class EmptyOrTruncatedFileError(PdbFileError):
    """
    Exception raised if no atoms were found in a file or
    the file could not be read up to its end.
    """
    pass


class CapacityExceededError(PdbFileError):
    """
    Exception raised if a file contains more atoms than an AtomStore may hold.
    """
    pass
