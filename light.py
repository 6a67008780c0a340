import numpy as np

from scene_settings import EPSILON
from tuples import dot, magnitude, normalize, reflect


class PointLight:
    def __init__(self, position, intensity=(1.0, 1.0, 1.0)):
        self.position = position
        self.intensity = np.array(intensity, dtype=np.float64)

    def __repr__(self):
        return "PointLight({!r}, {})".format(self.position, self.intensity.tolist())


def lighting(material, shape, light, point, eyev, normalv, in_shadow=False):
    """
    Phong reflection at a surface point for a single light.

    Args:
        material: Material of the surface.
        shape: the shape being shaded, needed to place the material's pattern.
        light: a PointLight.
        point: world-space point on the surface.
        eyev: unit vector from the point toward the eye.
        normalv: unit surface normal at the point.
        in_shadow: when True only the ambient term is returned. A light sitting
            on the point itself has no direction and also gives ambient only.

    Returns:
        The color contribution as a float array (not clamped).
    """
    if material.pattern is not None:
        surface_color = material.pattern.pattern_at_shape(shape, point)
    else:
        surface_color = material.color

    effective_color = surface_color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    to_light = light.position - point
    if magnitude(to_light) < EPSILON:
        return ambient
    lightv = normalize(to_light)

    # A negative cosine means the light is on the other side of the surface
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0:
        specular = np.zeros(3)
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
