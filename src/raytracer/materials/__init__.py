from raytracer.materials.dielectric import Dielectric, must_reflect, reflectance
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.material import Material, ScatterResult
from raytracer.materials.metal import Metal
from raytracer.materials.presets import DielectricPresets, DiffusePresets

__all__ = [
    "Material",
    "ScatterResult",
    "Lambertian",
    "Metal",
    "Dielectric",
    "must_reflect",
    "reflectance",
    "DielectricPresets",
    "DiffusePresets",
]
