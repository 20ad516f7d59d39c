from .vec3 import \
    I, \
    J, \
    K, \
    Vec3
