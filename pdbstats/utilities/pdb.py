"""
Reading (and writing) the ATOM records of PDB files.

Only the fixed columns holding the cartesian coordinates are interpreted,
everything else in a record is ignored.
"""

import math
import re
from collections import namedtuple

import numpy as np
import Bio.PDB as bpdb
from Bio.PDB.StructureBuilder import StructureBuilder

from logging_exceptions import log_to_exception

from pdbstats.model.atom_store import AtomStore
from pdbstats.utilities.exceptions import (FileOpenError, MalformedRecordError,
                                           CoordinateParseError,
                                           EmptyOrTruncatedFileError)

import logging
log = logging.getLogger(__name__)


AtomRecordLayout = namedtuple("AtomRecordLayout",
                              ["marker", "min_length", "coordinate_columns", "field_width"])

# Columns 31-38, 39-46 and 47-54 (1-based) of the wwPDB ATOM record.
PDB_ATOM_LAYOUT = AtomRecordLayout(marker="ATOM  ",
                                   min_length=60,
                                   coordinate_columns=(30, 38, 46),
                                   field_width=8)

COORDINATE_NAMES = ("x", "y", "z")

# A decimal number with optional exponent, padded with blanks.
NUMBER_PATTERN = re.compile(r"[ \t]*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[ \t]*")


def is_atom_record(line, layout=PDB_ATOM_LAYOUT):
    """
    Does the line start with the record marker of the layout?

    Note that the marker of PDB atom records is "ATOM" followed by two spaces,
    so HETATM records or lines starting with "ATOMS" are not atom records.
    """
    return line.startswith(layout.marker)


def parse_coordinate(field, name="coordinate"):
    """
    Convert the text of a single fixed-width field to a float.

    Blanks around the number are allowed. Anything else (including digit
    separators like "1_5" or non-ASCII digits), as well as non-finite
    values, leads to a CoordinateParseError.

    :param field: The field text, e.g. "  12.345"
    :param name: The name of the coordinate, used in the error message.
    """
    if not NUMBER_PATTERN.fullmatch(field):
        raise CoordinateParseError(
            "Error in coordinate conversion of {}: {!r}".format(name, field))
    value = float(field)
    if not math.isfinite(value):
        raise CoordinateParseError(
            "Error in coordinate conversion of {}: {!r} is not finite".format(name, field))
    return value


def parse_atom_record(line, layout=PDB_ATOM_LAYOUT):
    """
    Extract the coordinates from an atom record.

    The caller has to make sure that the line is long enough.

    :returns: A tuple (x, y, z) of floats
    """
    coords = []
    for name, start in zip(COORDINATE_NAMES, layout.coordinate_columns):
        field = line[start:start + layout.field_width]
        coords.append(parse_coordinate(field, name))
    return tuple(coords)


def read_atoms(lines, filename="<input>", max_atoms=None, layout=PDB_ATOM_LAYOUT):
    """
    Collect the coordinates of all atom records in lines.

    :param lines: An iterable of strings, usually an opened file.
    :param filename: The name used in error messages.
    :param max_atoms: The capacity of the returned AtomStore.
    :param layout: An AtomRecordLayout

    :returns: A sealed AtomStore
    """
    store = AtomStore(max_atoms, name=filename)
    line_nr = 0
    try:
        for line_nr, line in enumerate(lines, start=1):
            if not is_atom_record(line, layout):
                continue
            record = line.rstrip("\r\n")
            if len(record) < layout.min_length:
                raise MalformedRecordError(
                    "ATOM line is too short: {} characters (line {} of {}), "
                    "at least {} are required".format(len(record), line_nr, filename,
                                                      layout.min_length))
            try:
                store.append(parse_atom_record(record, layout))
            except CoordinateParseError as e:
                with log_to_exception(log, e):
                    log.error("Invalid atom record in line %d of %s: %r",
                              line_nr, filename, record)
                raise
    except (IOError, OSError) as e:
        raise EmptyOrTruncatedFileError(
            "Could not read {} beyond line {}: {}".format(filename, line_nr, e)) from e

    if len(store) == 0:
        raise EmptyOrTruncatedFileError(
            "Error - 0 atoms were found in the file {}".format(filename))
    log.debug("Read %d atoms from %d lines of %s", len(store), line_nr, filename)
    return store.seal()


def load_atoms(filename, max_atoms=None, layout=PDB_ATOM_LAYOUT):
    """
    Read all atom records of the PDB file filename.

    :returns: A sealed AtomStore
    """
    log.debug("Loading atoms from %s", filename)
    try:
        # One character per byte, so string offsets are byte offsets.
        pdbfile = open(filename, encoding="latin-1")
    except (IOError, OSError) as e:
        raise FileOpenError("Error opening file: {} ({})".format(filename, e)) from e
    with pdbfile:
        return read_atoms(pdbfile, filename, max_atoms, layout)


def output_atoms(coords, filename, resname="UNK", element="C"):
    '''
    Dump coordinates to a PDB file, one ATOM record (and residue) per row.

    Meant for creating test structures and fixtures; the analysis itself
    only reads PDB files.

    :param coords: A matrix (n x 3) of coordinates.
    :param filename: The place to dump it.
    '''
    coords = np.asarray(coords, dtype=float)
    builder = StructureBuilder()
    builder.init_structure("pdbstats")
    builder.init_model(0)
    builder.init_chain("A")
    builder.init_seg("    ")
    for i, coord in enumerate(coords):
        builder.init_residue(resname, " ", i + 1, " ")
        builder.init_atom(element, coord, 0.0, 1.0, " ", " {:<3s}".format(element),
                          serial_number=i + 1, element=element)
    io = bpdb.PDBIO()
    io.set_structure(builder.get_structure())
    io.save(filename)
    log.info("Wrote %d atoms to %s", len(coords), filename)
