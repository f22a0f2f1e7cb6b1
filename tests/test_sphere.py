import dataclasses
import unittest
import numpy as np

from PyIcoSphereLib import IcosphereBuilder, DepthTooLarge, make_icosphere, vertex_count, triangle_count
from PyIcoSphereLib.core.icosahedron import make_icosahedron
from PyIcoSphereLib.core.sphere import index_dtype_for_depth, max_depth_for_dtype
from PyIcoSphereLib.utils.validation import validate_mesh


class IcosphereBuilderTests(unittest.TestCase):
    def test_depth_zero_is_base_solid(self):
        mesh = IcosphereBuilder().build(0)
        base = make_icosahedron()
        np.testing.assert_array_equal(mesh.V, base.V)
        np.testing.assert_array_equal(mesh.F, base.F)

    def test_known_counts(self):
        builder = IcosphereBuilder()
        for depth, nv, nt in [(0, 12, 20), (1, 42, 80), (2, 162, 320), (3, 642, 1280)]:
            mesh = builder.build(depth)
            self.assertEqual(mesh.n_vertices, nv)
            self.assertEqual(mesh.n_triangles, nt)

    def test_growth_law_and_euler(self):
        builder = IcosphereBuilder()
        for depth in range(5):
            mesh = builder.build(depth)
            V, T = mesh.n_vertices, mesh.n_triangles
            E = len(mesh.edges())
            self.assertEqual(V, vertex_count(depth))
            self.assertEqual(T, triangle_count(depth))
            self.assertEqual(E, 3 * T // 2)
            self.assertEqual(V - E + T, 2)

    def test_unit_norm(self):
        mesh = IcosphereBuilder().build(4)
        np.testing.assert_allclose(np.linalg.norm(mesh.V, axis=1), 1.0, atol=1e-5)
        validate_mesh(mesh)

    def test_deterministic(self):
        a = IcosphereBuilder().build(3)
        b = IcosphereBuilder().build(3)
        self.assertTrue(np.array_equal(a.V, b.V))
        self.assertTrue(np.array_equal(a.F, b.F))

    def test_rebuild_independent_of_history(self):
        builder = IcosphereBuilder()
        first = builder.build(2)
        builder.build(4)
        builder.build(1)
        again = builder.build(2)
        self.assertTrue(np.array_equal(first.V, again.V))
        self.assertTrue(np.array_equal(first.F, again.F))

    def test_no_duplicate_positions(self):
        mesh = IcosphereBuilder().build(3)
        rounded = np.round(mesh.V, 9)
        self.assertEqual(len(np.unique(rounded, axis=0)), mesh.n_vertices)

    def test_negative_depth_rejected(self):
        with self.assertRaises(ValueError):
            IcosphereBuilder().build(-1)


class IndexWidthTests(unittest.TestCase):
    def test_dtype_selection(self):
        self.assertEqual(index_dtype_for_depth(0), np.dtype(np.uint16))
        self.assertEqual(index_dtype_for_depth(6), np.dtype(np.uint16))
        self.assertEqual(index_dtype_for_depth(7), np.dtype(np.uint32))
        self.assertEqual(index_dtype_for_depth(15), np.dtype(np.uint64))
        with self.assertRaises(DepthTooLarge):
            index_dtype_for_depth(31)

    def test_max_depth_for_dtype(self):
        self.assertEqual(max_depth_for_dtype(np.uint16), 6)
        self.assertEqual(max_depth_for_dtype(np.uint32), 14)

    def test_builder_uses_selected_dtype(self):
        mesh = IcosphereBuilder(max_depth=3).build(2)
        self.assertEqual(mesh.F.dtype, np.dtype(np.uint16))
        self.assertEqual(IcosphereBuilder().build(1).F.dtype, np.dtype(np.uint32))

    def test_uint16_depth_six_fits(self):
        mesh = IcosphereBuilder(index_dtype=np.uint16).build(6)
        self.assertEqual(mesh.n_vertices, 40962)
        self.assertEqual(int(mesh.F.max()), 40961)

    def test_uint16_depth_seven_raises(self):
        builder = IcosphereBuilder(index_dtype=np.uint16)
        with self.assertRaises(DepthTooLarge) as ctx:
            builder.build(7)
        self.assertEqual(ctx.exception.depth, 7)
        self.assertEqual(ctx.exception.vertex_count, 163842)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_signed_dtype_rejected(self):
        with self.assertRaises(ValueError):
            IcosphereBuilder(index_dtype=np.int32)


class MeshTests(unittest.TestCase):
    def test_mesh_is_read_only(self):
        mesh = IcosphereBuilder().build(1)
        with self.assertRaises(ValueError):
            mesh.V[0, 0] = 2.0
        with self.assertRaises(ValueError):
            mesh.F[0, 0] = 1
        with self.assertRaises(dataclasses.FrozenInstanceError):
            mesh.V = np.zeros((3, 3))

    def test_buffers(self):
        mesh = IcosphereBuilder(max_depth=2).build(2)
        vbo, ebo = mesh.to_buffers()
        self.assertEqual(vbo.dtype, np.float32)
        self.assertEqual(vbo.shape, (162, 3))
        self.assertEqual(ebo.dtype, np.uint16)
        self.assertEqual(ebo.shape, (320 * 3,))

    def test_center_of_mass_at_origin(self):
        mesh = IcosphereBuilder().build(2)
        np.testing.assert_allclose(mesh.center_of_mass(), 0.0, atol=1e-12)


class MakeIcosphereTests(unittest.TestCase):
    def test_scaled_and_translated(self):
        mesh = make_icosphere(subdivisions=2, R=0.5, center=(0, 0, 0.26))
        self.assertEqual(mesh.n_vertices, 162)
        r = np.linalg.norm(mesh.V - np.array([0.0, 0.0, 0.26]), axis=1)
        np.testing.assert_allclose(r, 0.5, atol=1e-6)

    def test_default_is_unit_sphere(self):
        mesh = make_icosphere(subdivisions=1)
        validate_mesh(mesh)
        self.assertEqual(mesh.F.dtype, np.dtype(np.uint16))


if __name__ == "__main__":
    unittest.main()
