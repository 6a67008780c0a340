"""Unit tests for sphere intersection and normals.

Tests cover:
- Ray hitting sphere from outside, from inside and from behind
- Ray missing sphere
- Ray tangent to sphere (two coincident intersections)
- Transformed spheres and normals
"""

import math

import pytest

from matrices import NonInvertibleMatrixError, identity
from material import Material
from rays import Ray
from surfaces.sphere import Sphere, glass_sphere
from transformations import rotation_z, scaling, translation
from tuples import magnitude, point, vector


class TestSphereIntersection:
    def test_two_points(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = Sphere().intersect(r)
        assert [i.t for i in xs] == [4.0, 6.0]

    def test_tangent_gives_two_equal_intersections(self):
        r = Ray(point(0, 1, -5), vector(0, 0, 1))
        xs = Sphere().intersect(r)
        assert len(xs) == 2
        assert xs[0].t == pytest.approx(5.0)
        assert xs[1].t == pytest.approx(5.0)

    def test_miss(self):
        r = Ray(point(0, 2, -5), vector(0, 0, 1))
        assert Sphere().intersect(r) == []

    def test_ray_originates_inside(self):
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        xs = Sphere().intersect(r)
        assert [i.t for i in xs] == [-1.0, 1.0]

    def test_sphere_behind_ray(self):
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        xs = Sphere().intersect(r)
        assert [i.t for i in xs] == [-6.0, -4.0]

    def test_intersect_sets_object(self):
        s = Sphere()
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert all(i.object is s for i in xs)

    def test_scaled_sphere(self):
        s = Sphere(transform=scaling(2, 2, 2))
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        s = Sphere(transform=translation(5, 0, 0))
        assert s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []


class TestSphereNormals:
    @pytest.mark.parametrize("p, expected", [
        (point(1, 0, 0), vector(1, 0, 0)),
        (point(0, 1, 0), vector(0, 1, 0)),
        (point(0, 0, 1), vector(0, 0, 1)),
    ])
    def test_axis_normals(self, p, expected):
        assert Sphere().normal_at(p) == expected

    def test_nonaxial_normal_is_normalized(self):
        k = math.sqrt(3) / 3
        n = Sphere().normal_at(point(k, k, k))
        assert n == vector(k, k, k)
        assert magnitude(n) == pytest.approx(1.0)

    def test_translated_sphere_normal(self):
        s = Sphere(transform=translation(0, 1, 0))
        assert s.normal_at(point(0, 1.70711, -0.70711)) == vector(0, 0.70711, -0.70711)

    def test_transformed_sphere_normal(self):
        s = Sphere(transform=scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        n = s.normal_at(point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
        assert n == vector(0, 0.97014, -0.24254)


class TestSphereState:
    def test_defaults(self):
        s = Sphere()
        assert s.transform == identity()
        assert s.material.ambient == 0.1
        assert s.parent is None

    def test_assign_material(self):
        m = Material(ambient=1)
        s = Sphere(material=m)
        assert s.material is m

    def test_singular_transform_fails_fast(self):
        s = Sphere()
        with pytest.raises(NonInvertibleMatrixError):
            s.transform = scaling(0, 1, 1)
        assert s.transform == identity()

    def test_glass_sphere(self):
        s = glass_sphere()
        assert s.transform == identity()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5
