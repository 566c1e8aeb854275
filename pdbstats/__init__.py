# pylint: disable=W0612

"""
pdbstats - geometric summaries of PDB coordinate files
======================================================

pdbstats reads the ``ATOM`` records of one or more PDB files and reports
three descriptors of the resulting point cloud: the center of gravity,
the radius of gyration and the maximum interatomic distance.

The typical entry point is `pdbstats.model.descriptors.describe_pdb`,
which returns a `GeometrySummary` for a single file. The command line
front-end is the ``analyze_protein.py`` script.
"""

__author__ = "pdbstats developers"
__copyright__ = "Copyright 2018 - 2026"
__license__ = "GNU GPL v 3.0"
__version__ = "1.0.0"
__maintainer__ = "pdbstats developers"


from pdbstats.model.descriptors import describe_pdb
