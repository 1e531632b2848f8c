"""Monte Carlo ray tracer for scenes built from spheres.

Subpackages:
    core: vectors, rays, intervals, colors and random sampling
    geometry: the Hittable interface, spheres and the scene list
    materials: Lambertian, metal and dielectric scattering
    camera: ray generation and the light transport integrator
    renderer: scanline rendering, tone mapping, image output and preview
"""

__version__ = "0.1.0"
