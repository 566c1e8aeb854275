import unittest
import math
import itertools as it

import numpy as np
import numpy.testing as nptest
from hypothesis import given, settings
from hypothesis.strategies import floats, lists, tuples, randoms, integers

import pdbstats.model.descriptors as psmd
import pdbstats.model.atom_store as psma
import pdbstats.utilities.vector as psuv

coordinate = floats(min_value=-999., max_value=999., allow_nan=False, allow_infinity=False)
atoms_strategy = lists(tuples(coordinate, coordinate, coordinate), min_size=1, max_size=40)


def sealed_store(atoms, name="test.pdb"):
    store = psma.AtomStore(name=name)
    for atom in atoms:
        store.append(atom)
    return store.seal()


class TestDescriptors(unittest.TestCase):
    def setUp(self):
        self.two = np.array([[0., 0., 0.], [2., 0., 0.]])
        self.cube = np.array([[x, y, z] for x in (9., 11.) for y in (19., 21.) for z in (29., 31.)])

    def test_center_of_gravity(self):
        nptest.assert_allclose(psmd.center_of_gravity(self.two), [1., 0., 0.])
        nptest.assert_allclose(psmd.center_of_gravity(self.cube), [10., 20., 30.])

    def test_center_of_gravity_empty(self):
        with self.assertRaises(ValueError):
            psmd.center_of_gravity(np.zeros((0, 3)))

    def test_wrong_dimension(self):
        with self.assertRaises(ValueError):
            psmd.center_of_gravity([[1., 2.], [3., 4.]])
        with self.assertRaises(ValueError):
            psmd.max_distance([1., 2., 3.])

    def test_radius_of_gyration(self):
        self.assertAlmostEqual(psmd.radius_of_gyration(self.two), 1.)
        self.assertAlmostEqual(psmd.radius_of_gyration(self.cube), math.sqrt(3))

    def test_radius_of_gyration_with_centroid(self):
        cg = psmd.center_of_gravity(self.cube)
        self.assertAlmostEqual(psmd.radius_of_gyration(self.cube, cg),
                               psmd.radius_of_gyration(self.cube))

    def test_radius_of_gyration_single_atom(self):
        self.assertEqual(psmd.radius_of_gyration([[5., -3., 2.]]), 0)

    def test_max_distance(self):
        self.assertAlmostEqual(psmd.max_distance(self.two), 2.)
        self.assertAlmostEqual(psmd.max_distance(self.cube), 2 * math.sqrt(3))

    def test_max_distance_single_atom(self):
        self.assertEqual(psmd.max_distance([[5., -3., 2.]]), 0.)

    def test_max_distance_first_pair(self):
        # The most distant pair involves the first atom
        coords = [[-10., 0., 0.], [10., 0., 0.], [0., 1., 0.], [0., 0., 1.]]
        self.assertAlmostEqual(psmd.max_distance(coords), 20.)

    def test_max_distance_blocks(self):
        rng = np.random.RandomState(42)
        coords = rng.uniform(-50, 50, size=(57, 3))
        expected = psmd.max_distance(coords, block_size=len(coords))
        for block_size in [1, 2, 10, 56, 100]:
            self.assertAlmostEqual(psmd.max_distance(coords, block_size=block_size), expected)

    def test_describe_atoms(self):
        summary = psmd.describe_atoms(sealed_store(self.two))
        self.assertEqual(summary.filename, "test.pdb")
        self.assertEqual(summary.num_atoms, 2)
        nptest.assert_allclose(summary.center_of_gravity, [1., 0., 0.])
        self.assertAlmostEqual(summary.radius_of_gyration, 1.)
        self.assertAlmostEqual(summary.max_distance, 2.)

    def test_describe_atoms_needs_sealed_store(self):
        store = psma.AtomStore()
        store.append((1., 2., 3.))
        with self.assertRaises(ValueError):
            psmd.describe_atoms(store)

    def test_describe_pdb(self):
        summary = psmd.describe_pdb("test/pdbstats/data/cube.pdb")
        self.assertEqual(summary.num_atoms, 8)
        nptest.assert_allclose(summary.center_of_gravity, [10., 20., 30.])
        self.assertAlmostEqual(summary.radius_of_gyration, math.sqrt(3))
        self.assertAlmostEqual(summary.max_distance, 2 * math.sqrt(3))

    def test_format_summary(self):
        summary = psmd.describe_pdb("test/pdbstats/data/two_atoms.pdb")
        self.assertEqual(psmd.format_summary(summary),
                         "PDB file test/pdbstats/data/two_atoms.pdb, 2 atoms were read\n"
                         "Cg = 1.000 0.000 0.000\n"
                         "Rg = 1.000\n"
                         "Dmax = 2.000")

    def test_format_summary_rounding(self):
        summary = psmd.GeometrySummary("x.pdb", 3, (1.23449, -0.0004, 12345.6789), 0.0005001, 7.)
        self.assertEqual(psmd.format_summary(summary).splitlines()[1:],
                         ["Cg = 1.234 -0.000 12345.679", "Rg = 0.001", "Dmax = 7.000"])

    def test_summaries_to_dataframe(self):
        summaries = [psmd.describe_pdb("test/pdbstats/data/two_atoms.pdb"),
                     psmd.describe_pdb("test/pdbstats/data/cube.pdb")]
        df = psmd.summaries_to_dataframe(summaries)
        self.assertEqual(list(df.columns), ["filename", "atoms", "cg_x", "cg_y", "cg_z", "rg", "dmax"])
        self.assertEqual(len(df), 2)
        self.assertEqual(list(df["atoms"]), [2, 8])
        self.assertAlmostEqual(df["cg_z"][1], 30.)
        self.assertAlmostEqual(df["dmax"][0], 2.)


class TestDescriptorProperties(unittest.TestCase):
    @given(atoms_strategy)
    def test_center_of_gravity_is_mean(self, atoms):
        coords = np.array(atoms)
        cg = psmd.center_of_gravity(coords)
        for i in range(3):
            self.assertAlmostEqual(cg[i], sum(a[i] for a in atoms) / len(atoms), delta=1e-6)

    @given(atoms_strategy)
    def test_radius_of_gyration_non_negative(self, atoms):
        coords = np.array(atoms)
        rg = psmd.radius_of_gyration(coords)
        self.assertGreaterEqual(rg, 0)
        # Rg can not exceed the largest distance of an atom to the centroid
        cg = psmd.center_of_gravity(coords)
        self.assertLessEqual(rg, max(psuv.vec_distance(a, cg) for a in coords) + 1e-6)

    @given(tuples(coordinate, coordinate, coordinate), integers(min_value=1, max_value=30))
    def test_radius_of_gyration_coincident(self, atom, n):
        self.assertAlmostEqual(psmd.radius_of_gyration(np.array([atom] * n)), 0, places=6)
        self.assertAlmostEqual(psmd.max_distance(np.array([atom] * n)), 0, places=6)

    @settings(max_examples=50)
    @given(lists(tuples(coordinate, coordinate, coordinate), min_size=2, max_size=25))
    def test_max_distance_brute_force(self, atoms):
        expected = max(psuv.vec_distance(a, b) for a, b in it.combinations(atoms, 2))
        self.assertAlmostEqual(psmd.max_distance(np.array(atoms), block_size=4), expected,
                               delta=1e-6 * max(1., expected))

    @given(atoms_strategy, randoms())
    def test_permutation_invariance(self, atoms, random):
        shuffled = list(atoms)
        random.shuffle(shuffled)
        s1 = psmd.describe_atoms(sealed_store(atoms))
        s2 = psmd.describe_atoms(sealed_store(shuffled))
        nptest.assert_allclose(s1.center_of_gravity, s2.center_of_gravity, atol=1e-6)
        self.assertAlmostEqual(s1.radius_of_gyration, s2.radius_of_gyration, delta=1e-6)
        self.assertAlmostEqual(s1.max_distance, s2.max_distance, delta=1e-6)
