import math
import logging
from collections import namedtuple

import numpy as np
import pandas as pd
from scipy.spatial.distance import cdist

import pdbstats.utilities.vector as psuv
import pdbstats.utilities.pdb as psup

log = logging.getLogger(__name__)
"""
This module contains functions for characterising a single point-cloud.
"""

# Rows of the distance matrix evaluated at once by max_distance
DISTANCE_BLOCK_SIZE = 1024

GeometrySummary = namedtuple("GeometrySummary",
                             ["filename", "num_atoms", "center_of_gravity",
                              "radius_of_gyration", "max_distance"])


def _as_coords(coords):
    coords = np.asarray(coords, dtype=float)
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError("Expected a list of 3D coordinates, found array of shape {}".format(
            coords.shape))
    return coords


def center_of_gravity(coords):
    '''
    The arithmetic mean of all coordinates.

    :param coords: A matrix (n x 3), n >= 1
    :returns: A numpy array of length 3
    '''
    return psuv.get_vector_centroid(_as_coords(coords))


def radius_of_gyration(coords, centroid=None):
    '''
    Calculate the radius of gyration, given a set of coordinates.

    This is the root mean squared distance of all points to their centroid.

    :param centroid: The center of gravity of coords, if it was already calculated.
    '''
    coords = _as_coords(coords)
    if centroid is None:
        centroid = center_of_gravity(coords)
    total = np.sum(psuv.squared_distances(coords, centroid))
    total /= len(coords)
    return math.sqrt(total)


def max_distance(coords, block_size=DISTANCE_BLOCK_SIZE):
    '''
    The largest euclidean distance between any two of the points.

    All pairs are compared, but only block_size rows of the
    distance matrix are held in memory at any time.

    :returns: A float. 0. for less than two points.
    '''
    coords = _as_coords(coords)
    if len(coords) < 2:
        return 0.
    max_sq = 0.
    for start in range(0, len(coords), block_size):
        block = cdist(coords[start:start + block_size], coords, "sqeuclidean")
        max_sq = max(max_sq, float(block.max()))
    return math.sqrt(max_sq)


def describe_atoms(store, filename=None):
    """
    Calculate all descriptors of a sealed AtomStore.

    :param filename: Stored in the summary. Defaults to the name of the store.
    :returns: A GeometrySummary
    """
    if filename is None:
        filename = store.name
    coords = store.coords
    cg = center_of_gravity(coords)
    rg = radius_of_gyration(coords, cg)
    dmax = max_distance(coords)
    log.info("%s: %d atoms, Cg=%s, Rg=%s, Dmax=%s", filename, len(coords), cg, rg, dmax)
    return GeometrySummary(filename, len(coords), tuple(float(c) for c in cg), rg, dmax)


def describe_pdb(filename, max_atoms=None):
    """
    Load the atoms of a PDB file and describe them.

    :returns: A GeometrySummary
    """
    store = psup.load_atoms(filename, max_atoms=max_atoms)
    return describe_atoms(store, filename)


def format_summary(summary):
    """
    The human readable report for one file, as printed by analyze_protein.py
    """
    lines = ["PDB file {}, {} atoms were read".format(summary.filename, summary.num_atoms),
             "Cg = {:.3f} {:.3f} {:.3f}".format(*summary.center_of_gravity),
             "Rg = {:.3f}".format(summary.radius_of_gyration),
             "Dmax = {:.3f}".format(summary.max_distance)]
    return "\n".join(lines)


def summaries_to_dataframe(summaries):
    """
    One row per summary, with the columns
    filename, atoms, cg_x, cg_y, cg_z, rg and dmax.
    """
    data = {"filename": [], "atoms": [], "cg_x": [], "cg_y": [], "cg_z": [],
            "rg": [], "dmax": []}
    for summary in summaries:
        data["filename"].append(summary.filename)
        data["atoms"].append(summary.num_atoms)
        for key, value in zip(["cg_x", "cg_y", "cg_z"], summary.center_of_gravity):
            data[key].append(value)
        data["rg"].append(summary.radius_of_gyration)
        data["dmax"].append(summary.max_distance)
    return pd.DataFrame(data, columns=["filename", "atoms", "cg_x", "cg_y", "cg_z", "rg", "dmax"])
