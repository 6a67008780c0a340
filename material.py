import numpy as np


class Material:
    """Surface appearance for the Phong model plus reflection and refraction.

    When a pattern is set it replaces the flat color.
    """

    def __init__(self, color=(1.0, 1.0, 1.0), ambient=0.1, diffuse=0.9, specular=0.9,
                 shininess=200.0, reflective=0.0, transparency=0.0, refractive_index=1.0,
                 pattern=None):
        if not 0.0 <= reflective <= 1.0:
            raise ValueError("reflective must be in [0, 1], got {}".format(reflective))
        if not 0.0 <= transparency <= 1.0:
            raise ValueError("transparency must be in [0, 1], got {}".format(transparency))
        if refractive_index <= 0.0:
            raise ValueError("refractive_index must be positive, got {}".format(refractive_index))

        self.color = np.array(color, dtype=np.float64)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    def __repr__(self):
        return ("Material(color={}, ambient={}, diffuse={}, specular={}, shininess={}, "
                "reflective={}, transparency={}, refractive_index={}, pattern={!r})").format(
                    self.color.tolist(), self.ambient, self.diffuse, self.specular, self.shininess,
                    self.reflective, self.transparency, self.refractive_index, self.pattern)
