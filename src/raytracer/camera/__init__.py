from raytracer.camera.camera import SHADOW_ACNE_EPSILON, Camera

__all__ = ["Camera", "SHADOW_ACNE_EPSILON"]
