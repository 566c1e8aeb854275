"""
The AtomStore holds the coordinates of all atoms read from a single PDB file.
"""

import logging

import numpy as np

from pdbstats.config import DEFAULT_MAX_ATOMS
from pdbstats.utilities.exceptions import CapacityExceededError

log = logging.getLogger(__name__)


class AtomStore(object):
    """
    An append-only, bounded list of (x, y, z) coordinates.

    Atoms are appended while a file is read. Afterwards the store is
    sealed and its coordinates become available as a read-only numpy array.
    Sealed stores cannot be extended any more.
    """

    def __init__(self, max_atoms=None, name=None):
        """
        :param max_atoms: The maximal number of atoms. None for the default capacity.
        :param name: Used in error messages, usually the filename.
        """
        if max_atoms is None:
            max_atoms = DEFAULT_MAX_ATOMS
        if max_atoms < 1:
            raise ValueError(
                "The capacity of an AtomStore has to be positive, not {}".format(max_atoms))
        self.max_atoms = max_atoms
        self.name = name
        self._atoms = []
        self._coords = None

    def __len__(self):
        return len(self._atoms)

    def __iter__(self):
        return iter(self._atoms)

    def __repr__(self):
        return "<AtomStore {!r}: {} atoms{}>".format(
            self.name, len(self), ", sealed" if self.is_sealed else "")

    @property
    def is_sealed(self):
        return self._coords is not None

    def append(self, coords):
        """
        Add the coordinates of one atom at the end of the store.

        :param coords: A sequence of three floats.
        """
        if self.is_sealed:
            raise ValueError("Cannot add atoms to the sealed store {!r}".format(self.name))
        if len(self._atoms) >= self.max_atoms:
            raise CapacityExceededError("More than {} atoms in {}".format(
                self.max_atoms, self.name))
        x, y, z = coords
        self._atoms.append((float(x), float(y), float(z)))

    def seal(self):
        """
        Mark the store as complete.

        :returns: self
        """
        if not self.is_sealed:
            coords = np.array(self._atoms, dtype=float).reshape((-1, 3))
            coords.flags.writeable = False
            self._coords = coords
            log.debug("Sealed AtomStore %s with %d atoms", self.name, len(self))
        return self

    @property
    def coords(self):
        """
        A read-only numpy array of shape (n, 3).

        Only available after the store was sealed.
        """
        if not self.is_sealed:
            raise ValueError("The AtomStore {!r} is still being populated. "
                             "Call seal() first.".format(self.name))
        return self._coords
