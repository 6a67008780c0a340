import math

import numpy as np

from intersections import hit, intersections, prepare_computations, schlick
from light import PointLight, lighting
from material import Material
from rays import Ray
from scene_settings import EPSILON, SceneSettings
from surfaces.sphere import Sphere
from transformations import scaling
from tuples import dot, magnitude, normalize, point


class World:
    """The scene: shapes, lights and the settings used to shade them.

    Shading never mutates the scene, so one World can be shared by every
    pixel of a render, including across worker processes.
    """

    def __init__(self, objects=(), lights=(), settings=None):
        self.objects = list(objects)
        self.lights = list(lights)
        self.settings = settings if settings is not None else SceneSettings()

    def add_object(self, shape):
        self.objects.append(shape)
        return shape

    def add_light(self, light):
        self.lights.append(light)
        return light

    def intersect(self, ray):
        """All intersections of the ray with every object, sorted by t."""
        xs = []
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        return intersections(*xs)

    def is_shadowed(self, point, light):
        """True when an object lies strictly between the point and the light."""
        to_light = light.position - point
        distance = magnitude(to_light)
        if distance < EPSILON:
            return False
        ray = Ray(point, normalize(to_light))

        return any(0 < i.t < distance for i in self.intersect(ray))

    def shade_hit(self, comps, remaining=None):
        if remaining is None:
            remaining = self.settings.max_recursions

        surface = np.zeros(3)
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(comps.object.material, comps.object, light,
                                         comps.over_point, comps.eyev, comps.normalv, shadowed)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        material = comps.object.material
        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray, remaining=None):
        if remaining is None:
            remaining = self.settings.max_recursions

        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return self.settings.background_color.copy()

        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps, remaining=None):
        if remaining is None:
            remaining = self.settings.max_recursions

        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0:
            return np.zeros(3)

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps, remaining=None):
        if remaining is None:
            remaining = self.settings.max_recursions

        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0:
            return np.zeros(3)

        direction = refraction_direction(comps)
        if direction is None:
            return np.zeros(3)

        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def refraction_direction(comps):
    """Direction of the transmitted ray by Snell's law, or None under total internal reflection."""
    n_ratio = comps.n1 / comps.n2
    cos_i = dot(comps.eyev, comps.normalv)
    sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
    if sin2_t > 1:
        return None

    cos_t = math.sqrt(1.0 - sin2_t)
    return comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio


def default_world():
    """Two concentric spheres lit from the upper left, used by most shading checks."""
    light = PointLight(point(-10, 10, -10), (1, 1, 1))
    s1 = Sphere(material=Material(color=(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    s2 = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return World([s1, s2], [light])
