from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere, hit_sphere
from geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "hit_sphere", "HittableList"]
