#!/usr/bin/python
import math
import logging

import numpy as np

log = logging.getLogger(__name__)


def vec_distance_squared(vec1, vec2):
    """
    The squared (euclidean) distance between two points vec1 and vec2.

    This is guaranteed to work for arbitrary but equal dimensions of vec1 and vec2.

    :param vec1, vec2: A list or np.array of floats
    :returns: A float
    """
    vec1 = np.asarray(vec1, dtype=float)
    vec2 = np.asarray(vec2, dtype=float)
    direction = vec2 - vec1
    return float(np.dot(direction, direction))


def vec_distance(vec1, vec2):
    """
    The (euclidean) distance between two points vec1 and vec2.

    :param vec1, vec2: A list or np.array of floats
    :returns: A float
    """
    return math.sqrt(vec_distance_squared(vec1, vec2))


def squared_distances(points, ref):
    '''
    The squared distance of every row in points to the point ref.

    :param points: A matrix (n x dim) of points.
    :param ref: A single point of the same dimension.
    :return: A 1D array of length n.
    '''
    diff_vecs = np.asarray(points, dtype=float) - np.asarray(ref, dtype=float)
    return np.sum(diff_vecs * diff_vecs, axis=1)


def get_vector_centroid(crds1):
    '''
    Find the centroid of a set of vectors.

    :param crds: A matrix containing all of the vectors.

    :return: The centroid of the rows of the matrix crds.
    '''
    crds1 = np.asarray(crds1, dtype=float)
    if len(crds1) == 0:
        raise ValueError("Cannot calculate the centroid of zero vectors.")
    centroid = np.sum(crds1, axis=0)
    centroid /= float(len(crds1))

    for i in centroid:
        if math.isnan(i):
            raise ValueError('nan encountered in centroid: {}, len crds1 = {}.'.format(
                centroid, len(crds1)))

    return centroid
