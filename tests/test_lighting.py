"""Unit tests for materials, point lights, Phong shading and scene settings."""

import math

import numpy as np
import pytest

from conftest import assert_color
from light import PointLight, lighting
from material import Material
from scene_settings import MAX_RECURSIONS, SceneSettings, is_approx
from surfaces.sphere import Sphere
from tuples import color, point, vector


class TestPointLight:
    def test_has_position_and_intensity(self):
        light = PointLight(point(0, 0, 0), color(1, 1, 1))
        assert light.position == point(0, 0, 0)
        assert_color(light.intensity, color(1, 1, 1))

    def test_default_intensity_is_white(self):
        assert_color(PointLight(point(1, 2, 3)).intensity, color(1, 1, 1))


class TestMaterial:
    def test_defaults(self):
        m = Material()
        assert_color(m.color, color(1, 1, 1))
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0
        assert m.pattern is None

    @pytest.mark.parametrize("kwargs", [
        {"reflective": -0.1},
        {"reflective": 1.5},
        {"transparency": -1},
        {"transparency": 2},
        {"refractive_index": 0},
        {"refractive_index": -1.5},
    ])
    def test_rejects_out_of_range_values(self, kwargs):
        with pytest.raises(ValueError):
            Material(**kwargs)


class TestLighting:
    """Phong shading of a default material at the origin."""

    def setup_method(self):
        self.m = Material()
        self.position = point(0, 0, 0)
        self.shape = Sphere()

    def shade(self, eyev, normalv, light, in_shadow=False):
        return lighting(self.m, self.shape, light, self.position, eyev, normalv, in_shadow)

    def test_eye_between_light_and_surface(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, -10), color(1, 1, 1)))
        assert_color(c, color(1.9, 1.9, 1.9))

    def test_eye_offset_45_degrees(self):
        s = math.sqrt(2) / 2
        c = self.shade(vector(0, s, -s), vector(0, 0, -1), PointLight(point(0, 0, -10), color(1, 1, 1)))
        assert_color(c, color(1.0, 1.0, 1.0))

    def test_light_offset_45_degrees(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 10, -10), color(1, 1, 1)))
        assert_color(c, color(0.7364, 0.7364, 0.7364))

    def test_eye_in_path_of_reflection(self):
        s = math.sqrt(2) / 2
        c = self.shade(vector(0, -s, -s), vector(0, 0, -1), PointLight(point(0, 10, -10), color(1, 1, 1)))
        assert_color(c, color(1.6364, 1.6364, 1.6364))

    def test_light_behind_surface(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, 10), color(1, 1, 1)))
        assert_color(c, color(0.1, 0.1, 0.1))

    def test_surface_in_shadow(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, -10), color(1, 1, 1)),
                       in_shadow=True)
        assert_color(c, color(0.1, 0.1, 0.1))

    def test_light_on_the_surface_point_gives_ambient(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, 0), color(1, 1, 1)))
        assert_color(c, color(0.1, 0.1, 0.1))

    def test_colored_light_tints_surface(self):
        self.m = Material(color=(1, 0, 0), ambient=1, diffuse=0, specular=0)
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, -10), color(0.5, 0.5, 0.5)))
        assert_color(c, color(0.5, 0, 0))

    def test_result_is_not_clamped(self):
        c = self.shade(vector(0, 0, -1), vector(0, 0, -1), PointLight(point(0, 0, -10), color(1, 1, 1)))
        assert np.all(c > 1.0)


class TestSceneSettings:
    def test_defaults(self):
        settings = SceneSettings()
        assert_color(settings.background_color, color(0, 0, 0))
        assert settings.max_recursions == MAX_RECURSIONS == 5

    def test_custom_values(self):
        settings = SceneSettings(background_color=(0.1, 0.2, 0.3), max_recursions=2)
        assert_color(settings.background_color, color(0.1, 0.2, 0.3))
        assert settings.max_recursions == 2

    @pytest.mark.parametrize("depth", [-1, 2.5])
    def test_rejects_bad_depth(self, depth):
        with pytest.raises(ValueError):
            SceneSettings(max_recursions=depth)

    def test_is_approx(self):
        assert is_approx(1.0, 1.00005)
        assert not is_approx(1.0, 1.001)
        assert is_approx(1.0, 1.001, eps=0.01)
        assert is_approx(math.inf, math.inf)
